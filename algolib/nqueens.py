"""Backtracking search for an N-Queens placement."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class NoSolutionError(ValueError):
    """Raised when no queen placement exists for the requested board."""


def _conflicts(board: list[int], row: int, width: int) -> bool:
    column = board[row]
    for earlier, earlier_column in enumerate(board[:row]):
        gap = row - earlier
        left = earlier_column - gap
        right = earlier_column + gap
        if (
            column == earlier_column
            or (left >= 0 and left == column)
            or (right < width and right == column)
        ):
            return True
    return False


def nqueens(board_width: int) -> list[int]:
    """Return the queen's column on each row of the first solution found."""
    if board_width < 1:
        raise ValueError("board width must be positive")

    board = [0] * board_width
    row = 0
    while True:
        if _conflicts(board, row, board_width):
            board[row] += 1
            while board[row] == board_width:
                board[row] = 0
                if row == 0:
                    raise NoSolutionError("No solution exists for specified board size.")
                row -= 1
                board[row] += 1
        else:
            row += 1
            if row == board_width:
                return board


def format_board(board: Sequence[int]) -> str:
    """Render a board as text, one row per line with Q marking the queen."""
    size = len(board)
    lines = (
        f"{queen}\t" + "".join("Q" if column == queen else "." for column in range(size))
        for queen in board
    )
    return "".join(line + "\n" for line in lines)


def _board_width_from(args: Sequence[str]) -> int:
    for arg in args:
        try:
            width = int(arg)
        except ValueError:
            continue
        if width != 0:
            return width
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Solve N-Queens for the size given on the command line (default 8)."""
    args = sys.argv[1:] if argv is None else argv
    board_width = _board_width_from(args)

    if board_width < 4:
        print(
            "Running algorithm with 8 as a default. Specify an alternative Chess board "
            "size for N-Queens as a command line argument.\n"
        )
        board_width = 8

    board = nqueens(board_width)
    print(f"N-Queens {board_width} by {board_width} board result:")
    print(format_board(board), end="")
    return 0
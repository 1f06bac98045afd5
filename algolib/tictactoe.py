"""Tic-tac-toe move selection by exhaustive minimax search."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

Board = Sequence[Sequence["Player"]]


class Player(Enum):
    """Contents of a board cell, and the outcome of a line of play."""

    BLANK = "_"
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> Player:
        if self is Player.X:
            return Player.O
        if self is Player.O:
            return Player.X
        raise ValueError("Minimax can't operate when a player isn't specified.")


@dataclass(frozen=True)
class Position:
    """A cell on the board: x is the column, y the row, both from 0."""

    x: int
    y: int


@dataclass
class PlayActions:
    """Equally good moves for one side and the outcome they lead to."""

    positions: list[Position] = field(default_factory=list)
    side: Player = Player.BLANK


def available_positions(board: Board) -> list[Position]:
    """Empty cells, row by row."""
    return [
        Position(x, y)
        for y, row in enumerate(board)
        for x, cell in enumerate(row)
        if cell is Player.BLANK
    ]


def win_check(player: Player, board: Board) -> bool:
    """True if player holds a full row, column or diagonal."""
    if player is Player.BLANK:
        return False
    lines = [
        [board[0][0], board[1][1], board[2][2]],
        [board[2][0], board[1][1], board[0][2]],
    ]
    for i in range(3):
        lines.append([board[i][0], board[i][1], board[i][2]])
        lines.append([board[0][i], board[1][i], board[2][i]])
    return any(all(cell is player for cell in line) for line in lines)


def _rank(side: Player, outcome: Player) -> int:
    """How good an outcome is from side's point of view."""
    if outcome is side:
        return 2
    if outcome is Player.BLANK:
        return 1
    return 0


def _record(side: Player, best: PlayActions | None, position: Position, outcome: Player) -> PlayActions:
    if best is None:
        return PlayActions([position], outcome)
    new_rank, best_rank = _rank(side, outcome), _rank(side, best.side)
    if new_rank > best_rank:
        return PlayActions([position], outcome)
    if new_rank == best_rank:
        best.positions.append(position)
    return best


def minimax(side: Player, board: Board) -> PlayActions | None:
    """Best moves for side and the outcome they secure.

    Returns None when the game is already won or no cell is free.
    """
    if win_check(Player.X, board) or win_check(Player.O, board):
        return None

    opposite = side.opponent
    positions = available_positions(board)
    if not positions:
        return None

    best: PlayActions | None = None
    for pos in positions:
        next_board = [list(row) for row in board]
        next_board[pos.y][pos.x] = side

        if win_check(Player.X, next_board):
            outcome = Player.X
        elif win_check(Player.O, next_board):
            outcome = Player.O
        else:
            result = minimax(opposite, next_board)
            outcome = result.side if result is not None else Player.BLANK
        best = _record(side, best, pos, outcome)
    return best


def render_board(board: Board) -> str:
    """The board as text, rows numbered from 1 and columns lettered a to c."""
    lines = [""]
    for y, row in enumerate(board, start=1):
        lines.append(f"{y} " + "".join(f"{cell.value} " for cell in row))
    lines.append("  a b c")
    return "\n".join(lines) + "\n"


def _parse_move(text: str) -> Position | None:
    text = text.strip().lower()
    if len(text) != 2:
        return None
    column_char, row_char = text
    if not (column_char.isascii() and column_char.isalpha()):
        return None
    if not (row_char.isascii() and row_char.isdigit()):
        return None
    column = ord(column_char) - ord("a")
    row = ord(row_char) - ord("1")
    if 0 <= column <= 2 and 0 <= row <= 2:
        return Position(column, row)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Play X against the computer on standard input and output."""
    board = [[Player.BLANK] * 3 for _ in range(3)]

    while (
        available_positions(board)
        and not win_check(Player.X, board)
        and not win_check(Player.O, board)
    ):
        print(render_board(board), end="")
        print("Type in coordinate for X mark to be played. ie. a1 etc.")
        try:
            line = input()
        except EOFError:
            return 0

        move = _parse_move(line)
        if move is None:
            continue
        if move not in available_positions(board):
            print("Not a valid empty coordinate.")
            continue

        board[move.y][move.x] = Player.X
        if win_check(Player.X, board):
            print(render_board(board), end="")
            print("Player X Wins!")
            return 0

        response = minimax(Player.O, board)
        if response is None:
            print(render_board(board), end="")
            print("Draw game.")
            return 0
        reply = response.positions[0]
        board[reply.y][reply.x] = Player.O
        if win_check(Player.O, board):
            print(render_board(board), end="")
            print("Player O Wins!")
            return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
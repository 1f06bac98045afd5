# algolib

A collection of classic algorithms written in plain Python, with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions and classes |
| --- | --- |
| `algolib.number_theory` | `extended_euclidean_algorithm`, `fast_power`, `greatest_common_divisor_recursive`, `greatest_common_divisor_iterative`, `is_perfect_number`, `perfect_numbers`, `prime_numbers`, `trial_division` |
| `algolib.prime_check` | `prime_check` |
| `algolib.pascal` | `pascal_triangle` |
| `algolib.searching` | `binary_search`, `binary_search_rec`, `linear_search` |
| `algolib.fibonacci` | `fibonacci`, `recursive_fibonacci`, `classical_fibonacci`, `logarithmic_fibonacci`, `memoized_fibonacci` |
| `algolib.edit_distance` | `edit_distance`, `edit_distance_se` |
| `algolib.egg_dropping` | `egg_drop` |
| `algolib.coin_change` | `coin_change` |
| `algolib.knapsack` | `knapsack` |
| `algolib.rod_cutting` | `rod_cut` |
| `algolib.maximal_square` | `maximal_square` |
| `algolib.maximum_subarray` | `maximum_subarray` |
| `algolib.subsequences` | `longest_common_subsequence`, `longest_continuous_increasing_subsequence` |
| `algolib.is_subsequence` | `is_subsequence` |
| `algolib.two_sum` | `two_sum` |
| `algolib.hanoi` | `hanoi` |
| `algolib.nqueens` | `nqueens`, `format_board`, `NoSolutionError`, `main` |
| `algolib.kmeans` | `kmeans` |
| `algolib.convex_hull` | `convex_hull_graham` |
| `algolib.breadth_first_search` | `Graph`, `breadth_first_search` |
| `algolib.depth_first_search` | `Graph`, `depth_first_search` |
| `algolib.dijkstra` | `dijkstra` |
| `algolib.bellman_ford` | `bellman_ford` |
| `algolib.prim` | `prim`, `prim_with_start`, `add_undirected_edge` |
| `algolib.kruskal` | `Edge`, `kruskal` |
| `algolib.tictactoe` | `Player`, `Position`, `PlayActions`, `available_positions`, `win_check`, `minimax`, `render_board`, `main` |

A few behaviours worth knowing:

- `fibonacci` and `recursive_fibonacci` count from F(0) = F(1) = 1; the
  `classical_`, `logarithmic_` and `memoized_` variants count from F(0) = 0.
- `edit_distance`, `edit_distance_se` and `is_subsequence` compare the UTF-8
  bytes of their arguments; `longest_common_subsequence` compares characters.
- `knapsack` returns the profit, the total weight and the 1-based indices of
  the chosen items.
- `convex_hull_graham` starts from the lowest, then leftmost, point, goes
  counter-clockwise and keeps collinear points on the boundary.
- `kmeans` takes evenly spaced data points as its initial centroids, so the
  result is deterministic.
- Invalid arguments raise `ValueError` (for example `maximum_subarray([])`,
  `egg_drop(0, 5)` or `trial_division(0)`); `nqueens` raises
  `NoSolutionError`, a `ValueError`, for board widths with no solution.

## Examples

```python
from algolib.number_theory import extended_euclidean_algorithm, prime_numbers
from algolib.coin_change import coin_change
from algolib.knapsack import knapsack
from algolib.nqueens import nqueens
from algolib.subsequences import longest_common_subsequence

extended_euclidean_algorithm(101, 13)    # (1, 4, -31)
prime_numbers(11)                        # [2, 3, 5, 7, 11]
coin_change([1, 2, 5], 11)               # 3
coin_change([2], 3)                      # None: the amount cannot be made up
knapsack(26, [12, 7, 11, 8, 9], [24, 13, 23, 15, 16])
                                         # (51, 26, [2, 3, 4])
nqueens(4)                               # [1, 3, 0, 2]: queen column on each row
longest_common_subsequence("aggtab", "gxtxayb")  # "gtab"
```

Weighted graphs for `dijkstra`, `bellman_ford` and `prim` are dictionaries
that map each vertex to a dictionary of its neighbours and edge costs:

```python
from algolib.dijkstra import dijkstra

graph = {"a": {"c": 12, "d": 60}, "b": {"a": 10}, "c": {"b": 20, "d": 32}, "d": {}}
dijkstra(graph, "a")
# {"a": None, "c": ("a", 12), "d": ("c", 44), "b": ("c", 32)}
```

Each reachable vertex maps to its predecessor and distance; the start vertex
maps to `None`. `bellman_ford` returns the same shape, or `None` when the graph
holds a negative cycle. `prim` returns the spanning tree in the same
dictionary form, with each edge stored in both directions.

The unweighted search functions take a `Graph` built from a list of vertices
and a list of `(source, destination)` edges, and return the vertices visited
until the target is reached, or `None`:

```python
from algolib.breadth_first_search import Graph, breadth_first_search

graph = Graph(nodes=[1, 2, 3, 4], edges=[(1, 2), (1, 3), (2, 4)])
breadth_first_search(graph, 1, 4)        # [1, 2, 3, 4]
```

## Command-line tools

Solve the N-Queens puzzle. The first non-zero integer argument is the board
width; when it is missing or below 4, a width of 8 is used:

```
algolib-nqueens 10
```

Play tic-tac-toe as X against the minimax player, entering moves such as `a1`
or `c3` (column letter, then row number). The computer plays the first of its
best moves, so its play is deterministic:

```
algolib-tictactoe
```

## Not included

The geometry in this package is limited to the convex hull; there is no
closest-pair-of-points search.
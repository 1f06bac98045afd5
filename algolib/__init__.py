"""Classic algorithms: number theory, searching, dynamic programming, graphs, clustering and convex hulls."""

__version__ = "0.1.0"

__all__ = [
    "bellman_ford",
    "breadth_first_search",
    "coin_change",
    "convex_hull",
    "depth_first_search",
    "dijkstra",
    "edit_distance",
    "egg_dropping",
    "fibonacci",
    "hanoi",
    "is_subsequence",
    "kmeans",
    "knapsack",
    "kruskal",
    "maximal_square",
    "maximum_subarray",
    "nqueens",
    "number_theory",
    "pascal",
    "prim",
    "prime_check",
    "rod_cutting",
    "searching",
    "subsequences",
    "tictactoe",
    "two_sum",
]
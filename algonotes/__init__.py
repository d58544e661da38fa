"""Tree, binary search tree, dynamic programming, graph and grid algorithms."""

__version__ = "0.1.0"
__all__ = [
    "bst",
    "dp_choices",
    "dp_intervals",
    "dp_strings",
    "graph_traversal",
    "grids",
    "shortest_paths",
    "trees",
]
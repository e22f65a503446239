"""Classic algorithm puzzles solved in plain Python, one module per topic."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "dynamic",
    "grids",
    "linked_lists",
    "lru_cache",
    "sequences",
    "strings",
    "trees",
]
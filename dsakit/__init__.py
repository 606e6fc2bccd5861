"""Array, matrix, linked-list, string and text-pattern exercises, with a small command line."""

__version__ = "0.1.0"

__all__ = ["arrays", "matrix", "linked_list", "strings", "patterns", "cli"]
"""Classic data structures, sorts, dynamic programming and small object models."""

__version__ = "0.1.0"

__all__ = [
    "animals",
    "binarytree",
    "bounded",
    "cards",
    "containers",
    "date",
    "dynamic",
    "heap",
    "linkedlist",
    "point",
    "sorting",
    "students",
    "text",
]
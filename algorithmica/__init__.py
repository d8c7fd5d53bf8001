"""Classic algorithms and data-structure exercises, with a checksum command."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "checksum",
    "graphs",
    "linked_list",
    "matrix",
    "numbers",
    "searching",
    "sorting",
    "strings",
    "sudoku",
    "trees",
]
"""String, number, line-reading, sorting and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "lists", "numbers", "printf", "reader", "spec", "text"]
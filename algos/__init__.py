"""Sorting algorithms, a bounded stack, and binary search and red-black trees."""

__version__ = "0.1.0"
__all__ = ["sort", "stack", "bst", "rbt"]
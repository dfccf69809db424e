"""A red-black tree, tree records, a process model, a bounded queue and a coin-flip histogram."""

__version__ = "0.1.0"
__all__ = ["rbtree", "data", "example", "proc", "slice", "histogram"]
"""Parent-linked binary trees: construction, traversal, measures and printing."""

__version__ = "0.1.0"
__all__ = ["measures", "node", "printing", "traversal"]
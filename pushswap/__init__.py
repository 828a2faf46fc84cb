"""Two-stack integer sorting with a restricted set of operations."""

__version__ = "1.0.0"
__all__ = ["analysis", "cli", "parsing", "sorting", "stacks"]
"""Two-stack integer sorting with a restricted set of moves."""

__version__ = "0.1.0"
"""The 15 sliding-tile puzzle for the terminal, with an automatic solver."""

__version__ = "0.1.0"
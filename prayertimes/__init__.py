"""Daily prayer times in the terminal, with tracking of the next prayer."""

__version__ = "0.1.0"
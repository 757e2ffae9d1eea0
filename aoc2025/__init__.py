"""Daily puzzle solutions and a command to run them."""

__version__ = "0.1.0"
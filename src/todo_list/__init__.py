"""Interactive command-line to-do list manager."""

__version__ = "0.1.0"

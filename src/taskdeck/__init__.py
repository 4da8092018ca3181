"""taskdeck - personal task manager core."""

__version__ = "0.1.0"

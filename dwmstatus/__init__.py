"""Status line generator for the dwm status bar."""

__version__ = "0.1.0"

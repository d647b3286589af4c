"""gitsw - Interactively switch git branches."""

__version__ = "0.1.0"

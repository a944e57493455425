"""A small menu-driven terminal line editor with undo, redo, search and highlighting."""

__version__ = "0.1.0"
"""Editing model for a multi-line terminal text area: keys, cursor moves, scrolling, undo history and highlighting."""

__version__ = "0.7.0"
"""A line-oriented console text editor with tasks, contacts, undo/redo and Caesar encryption."""

__version__ = "0.1.0"
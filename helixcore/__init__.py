"""Text-editing core: change sets, transactions, selections, undo history, movement and search."""

__version__ = "0.1.0"
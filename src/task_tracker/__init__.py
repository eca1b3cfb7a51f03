"""Simple task tracker: in-memory task list persisted to a key-value sink."""

__version__ = "0.1.0"

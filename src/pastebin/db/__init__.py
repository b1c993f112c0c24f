"""Paste persistence: one table, one connection, one lock."""

from .store import DuplicateTokenError, PasteStore, StorageError

__all__ = [
    "PasteStore",
    "StorageError",
    "DuplicateTokenError",
]

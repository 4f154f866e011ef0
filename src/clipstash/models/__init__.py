"""
clipstash.models
Pydantic domain models for the clipboard store.

Contents:
- History: a named mapping of key to clipboard value.
- FlatEntry: one (history, key, value) triple used for import and export.
- Store: every History plus the current selection.
"""

from .history import FlatEntry, History  # noqa: F401
from .store import DEFAULT_HISTORY, Document, Store  # noqa: F401

__models__ = ["History", "FlatEntry", "Store"]
__all__ = [*__models__, "Document", "DEFAULT_HISTORY"]

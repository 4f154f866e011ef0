"""
clipstash

A personal clipboard-history manager. Clipboard contents are saved under a key
inside a named history, persisted to a JSON file, and can be listed, searched,
recalled to the clipboard, deleted, exported, and imported.

Packages:
- clipstash.models: Store, History, and FlatEntry models.
- clipstash.services: persistence codec, merge engine, and search.
- clipstash.config: pydantic-settings configuration.
"""

from .errors import (  # noqa: F401
    ClipboardUnavailableError,
    ClipStashError,
    CorruptDataError,
    InvalidInputError,
    IoFailureError,
    NotFoundError,
    PersistError,
    UnsupportedFormatError,
    UserCancelledError,
)
from .models import FlatEntry, History, Store  # noqa: F401

__version__ = "0.1.0"

# region Docstring
"""
clipstash.models.store
The in-memory Store: every saved History plus the session's current selection.
Overview:
- Holds a mapping from history name to History and exposes the store operations
    used by the interactive shell and the CLI (save/get/delete entry, list
    histories and entries, select).
- Converts to and from the canonical document, the nested
    {history: {key: value}} mapping written to disk and used for JSON export.
Contents:
- Pydantic models:
    - Store:
        Aggregate of History models keyed by name. Histories are created lazily
        by history() and save_entry(). Lookups that can miss raise NotFoundError.
- Module-level:
    - DOCUMENT_ADAPTER: Strict TypeAdapter for the canonical document shape.
Design notes:
- The Store never touches the filesystem; services.codec loads and saves it and
    the caller decides when to persist.
- `current` is session state. It is excluded from serialization and equality.
"""
# endregion
# region Imports
from typing import Iterator, KeysView

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from clipstash.errors import CorruptDataError, NotFoundError

from .history import FlatEntry, History

# endregion

Document = dict[str, dict[str, str]]
"""The canonical nested document: history name -> key -> value."""

DOCUMENT_ADAPTER: TypeAdapter[Document] = TypeAdapter(
    Document, config=ConfigDict(strict=True)
)
"""[TypeAdapter] Strict validator for the canonical document shape."""

DEFAULT_HISTORY = "default"


# region Store Model
class Store(BaseModel):
    """
    All saved clipboard histories.

    Attributes:
        histories (dict[str, History]): History models keyed by their name.
        current (str): Name of the currently selected history (session only).
    """

    histories: dict[str, History] = Field(
        default_factory=dict, description="Histories keyed by name"
    )
    current: str = Field(
        default=DEFAULT_HISTORY,
        exclude=True,
        description="Currently selected history name",
    )

    @model_validator(mode="after")
    def _names_match_keys(self) -> "Store":
        for name, history in self.histories.items():
            if history.name != name:
                raise ValueError(
                    f"history stored under {name!r} is named {history.name!r}"
                )
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self.histories == other.histories

    # region Histories
    def history(self, name: str) -> History:
        """Return the named History, creating an empty one if absent."""
        if name not in self.histories:
            self.histories[name] = History(name=name)
        return self.histories[name]

    def create_history(self, name: str) -> History:
        """Create an empty History if one does not exist yet."""
        return self.history(name)

    def get_history(self, name: str) -> History:
        """Return the named History or raise NotFoundError."""
        try:
            return self.histories[name]
        except KeyError:
            raise NotFoundError(name) from None

    def has_history(self, name: str) -> bool:
        return name in self.histories

    def list_histories(self) -> KeysView[str]:
        """
        Return the history names.

        The view is lazy and can be iterated any number of times; each name
        appears exactly once.
        """
        return self.histories.keys()

    def select(self, name: str) -> History:
        """Make name the current history. Raises NotFoundError if absent."""
        history = self.get_history(name)
        self.current = name
        return history

    # endregion
    # region Entries
    def save_entry(self, history_name: str, key: str, value: str) -> None:
        """Insert or overwrite value under key, creating the history if needed."""
        self.history(history_name).put(key, value)

    def get_entry(self, history_name: str, key: str) -> str:
        return self.get_history(history_name).get(key)

    def delete_entry(self, history_name: str, key: str) -> str:
        """Remove key from the named history and return the removed value."""
        return self.get_history(history_name).delete(key)

    def list_entries(self, history_name: str) -> list[tuple[str, str]]:
        return self.get_history(history_name).items()

    def flatten(self) -> Iterator[FlatEntry]:
        """Yield every entry as a FlatEntry, history by history."""
        for name, history in self.histories.items():
            for key, value in history.entries.items():
                yield FlatEntry(history=name, key=key, value=value)

    @property
    def is_empty(self) -> bool:
        return not self.histories

    @property
    def entry_count(self) -> int:
        return sum(len(h.entries) for h in self.histories.values())

    # endregion
    # region Canonical Document
    def to_document(self) -> Document:
        """Return the nested {history: {key: value}} mapping."""
        return {
            name: dict(history.entries) for name, history in self.histories.items()
        }

    @classmethod
    def from_document(cls, document: object) -> "Store":
        """
        Build a Store from a canonical document.

        Raises:
            CorruptDataError: If document is not a mapping of string history
                names to mappings of string keys to string values.
        """
        try:
            validated = DOCUMENT_ADAPTER.validate_python(document)
        except ValidationError as e:
            raise CorruptDataError(
                f"Expected a mapping of history -> key -> value: {e}"
            ) from e
        return cls(
            histories={
                name: History(name=name, entries=entries)
                for name, entries in validated.items()
            }
        )

    # endregion


# endregion

__all__ = ["Store", "Document", "DOCUMENT_ADAPTER", "DEFAULT_HISTORY"]

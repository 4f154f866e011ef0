# region Docstring
"""
clipstash.models.history
Domain models for a single clipboard history and the flattened interchange row.
Overview:
- A History is a named mapping from key to clipboard value. Keys are unique
    because they are dictionary keys; saving an existing key overwrites it.
- A FlatEntry is one (history, key, value) triple, the unit used by CSV/JSON
    import and export and by the merge engine.
Contents:
- Pydantic models:
    - History:
        Named key/value mapping with put/get/delete helpers. Validates that every
        key and value is a string so malformed data is rejected at construction.
    - FlatEntry:
        Frozen (history, key, value) triple with an as_row() helper for CSV.
Design notes:
- Dict insertion order is kept for display and deterministic serialization only;
    nothing depends on it for correctness.
- Empty string values are legal (an empty clipboard is still a capture).
"""
# endregion
# region Imports
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clipstash.errors import NotFoundError


# endregion
# region History Model
class History(BaseModel):
    """
    A named mapping of keys to clipboard values.

    Attributes:
        name (str): The history name, unique within a Store.
        entries (dict[str, str]): Key to value mapping.

    Example:
        >>> h = History(name="work")
        >>> h.put("snippet", "echo hi")
        >>> h.get("snippet")
        'echo hi'
    """

    name: str = Field(..., description="The history name")
    entries: dict[str, str] = Field(
        default_factory=dict, description="Mapping of key to clipboard value"
    )

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        json_schema_extra={
            "examples": [{"name": "work", "entries": {"snippet": "echo hi"}}]
        },
    )

    @field_validator("entries", mode="before")
    @classmethod
    def _entries_are_strings(cls, v: object) -> object:
        if not isinstance(v, dict):
            raise ValueError("entries must be a mapping of key to value")
        for key, value in v.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValueError(
                    f"entry {key!r} must map a string key to a string value"
                )
        return v

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def put(self, key: str, value: str) -> Optional[str]:
        """Insert or overwrite a value. Returns the previous value, if any."""
        previous = self.entries.get(key)
        self.entries[key] = value
        return previous

    def get(self, key: str) -> str:
        """Return the value stored under key or raise NotFoundError."""
        try:
            return self.entries[key]
        except KeyError:
            raise NotFoundError(self.name, key) from None

    def delete(self, key: str) -> str:
        """Remove key and return its value or raise NotFoundError."""
        try:
            return self.entries.pop(key)
        except KeyError:
            raise NotFoundError(self.name, key) from None

    def items(self) -> list[tuple[str, str]]:
        return list(self.entries.items())

    @property
    def is_empty(self) -> bool:
        return not self.entries


# endregion
# region FlatEntry Model
class FlatEntry(BaseModel):
    """
    A single (history, key, value) triple.

    Attributes:
        history (str): Owning history name.
        key (str): Entry key.
        value (str): Entry value, may be empty.
    """

    history: str
    key: str
    value: str = ""

    model_config = ConfigDict(frozen=True, strict=True)

    def as_row(self) -> list[str]:
        """Return the triple as a CSV row."""
        return [self.history, self.key, self.value]


# endregion

__all__ = ["History", "FlatEntry"]

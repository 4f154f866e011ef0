# region Docstring
"""
clipstash.errors
Exception hierarchy shared by the store, codec, services, and shell layers.
Overview:
- Every failure the interactive shell can report derives from ClipStashError so
    the action loop can catch one type, log it, and show a message.
- Several classes also subclass the matching builtin (KeyError, ValueError,
    OSError) so callers that only know the builtin still catch them.
Contents:
- ClipStashError: Base class.
- NotFoundError: A history or key is absent on lookup/delete/select.
- CorruptDataError: Persisted or imported content does not parse into the
    expected shape.
- ClipboardUnavailableError: The OS clipboard cannot be read or written.
- InvalidInputError: An empty required field or otherwise unusable input.
- IoFailureError: A file create/read/write error at the OS boundary.
- UnsupportedFormatError: An export/import format other than JSON or CSV.
- UserCancelledError: The user backed out of a prompt.
- PersistError: The in-memory store changed but writing it to disk failed.
"""
# endregion


class ClipStashError(Exception):
    """Base class for all clipstash errors."""

    pass


class NotFoundError(ClipStashError, KeyError):
    """Raised when a history or key does not exist."""

    def __init__(self, history: str, key: str | None = None) -> None:
        self.history = history
        self.key = key
        if key is None:
            message = f"History '{history}' does not exist."
        else:
            message = f"Key '{key}' does not exist in history '{history}'."
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class CorruptDataError(ClipStashError, ValueError):
    """Raised when content cannot be parsed into the expected shape."""

    pass


class ClipboardUnavailableError(ClipStashError):
    """Raised when the OS clipboard cannot be accessed."""

    pass


class InvalidInputError(ClipStashError, ValueError):
    """Raised for empty required fields and other unusable input."""

    pass


class IoFailureError(ClipStashError, OSError):
    """Raised when a file operation fails at the OS boundary."""

    pass


class UnsupportedFormatError(ClipStashError, ValueError):
    """Raised for export/import formats other than JSON and CSV."""

    pass


class UserCancelledError(ClipStashError):
    """Raised when the user cancels a prompt."""

    pass


class PersistError(ClipStashError):
    """
    Raised when a mutation succeeded in memory but the store could not be
    written to disk. The in-memory store now differs from the file; calling
    save again is the recovery path.
    """

    pass


__all__ = [
    "ClipStashError",
    "NotFoundError",
    "CorruptDataError",
    "ClipboardUnavailableError",
    "InvalidInputError",
    "IoFailureError",
    "UnsupportedFormatError",
    "UserCancelledError",
    "PersistError",
]

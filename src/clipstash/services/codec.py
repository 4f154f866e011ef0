# region Docstring
"""
clipstash.services.codec
Reading and writing the Store: the canonical store file plus JSON/CSV interchange.
Overview:
- The canonical store file is the nested document {history: {key: value}},
    pretty-printed as UTF-8 JSON.
- Saves go to a temp file next to the target and are moved into place with
    os.replace, so a reader never sees a half-written store.
- Export writes either the canonical document (JSON) or one row per
    (history, key, value) triple (CSV, no header). Import reads the same two
    shapes back into a list of FlatEntry triples, in file order.
Contents:
- Enums:
    - ExportFormat: "json" | "csv", with from_name() and from_path() helpers.
- Functions:
    - load(path) -> Store
    - load_or_empty(path) -> Store
    - save(store, path) -> Path
    - dumps_document(store) -> str
    - export_store(store, path, fmt) -> Path
    - import_entries(path, fmt) -> list[FlatEntry]
Design notes:
- OSError is always re-raised as IoFailureError; parse and shape failures as
    CorruptDataError. FileNotFoundError on load is not special-cased here: the
    caller checks existence first (load_or_empty does that).
"""
# endregion
# region Imports
import csv
import io
import json
import logging
import os
import sys
import tempfile
from enum import StrEnum
from pathlib import Path
from typing import Iterable

from clipstash.errors import CorruptDataError, IoFailureError, UnsupportedFormatError
from clipstash.models import FlatEntry, Store

# endregion

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
CSV_FIELDS = 3


# region ExportFormat Enum
class ExportFormat(StrEnum):
    """Interchange formats supported by export and import."""

    JSON = "json"
    CSV = "csv"

    @classmethod
    def from_name(cls, name: "str | ExportFormat") -> "ExportFormat":
        """Parse a format name case-insensitively."""
        if isinstance(name, ExportFormat):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnsupportedFormatError(
                f"Unsupported format '{name}'. Use one of: "
                + ", ".join(f.value for f in cls)
            ) from None

    @classmethod
    def from_path(cls, path: Path) -> "ExportFormat":
        """Infer the format from a file suffix (.json or .csv)."""
        suffix = Path(path).suffix.lstrip(".")
        if not suffix:
            raise UnsupportedFormatError(
                f"Cannot infer a format from '{path}': it has no file extension."
            )
        return cls.from_name(suffix)


# endregion
# region Canonical Store File
def dumps_document(store: Store) -> str:
    """Serialize the store to the pretty-printed canonical document."""
    return json.dumps(store.to_document(), ensure_ascii=False, indent=2) + "\n"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding=ENCODING)
    except UnicodeDecodeError as e:
        raise CorruptDataError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise IoFailureError(f"Could not read {path}: {e}") from e


def _parse_document(text: str, source: Path) -> Store:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptDataError(f"{source} is not valid JSON: {e}") from e
    try:
        return Store.from_document(document)
    except CorruptDataError as e:
        raise CorruptDataError(f"{source}: {e}") from e


def load(path: Path) -> Store:
    """
    Load a Store from the canonical JSON document at path.

    Raises:
        CorruptDataError: If the file is not JSON or not the expected shape.
        IoFailureError: If the file cannot be read.
    """
    path = Path(path)
    store = _parse_document(_read_text(path), path)
    logger.debug(
        "Loaded %d histories (%d entries) from %s",
        len(store.histories),
        store.entry_count,
        path,
    )
    return store


def load_or_empty(path: Path) -> Store:
    """Load the store at path, or return an empty Store when it does not exist."""
    path = Path(path)
    if not path.exists():
        logger.info("No store file at %s, starting empty.", path)
        return Store()
    return load(path)


def _file_mode(path: Path) -> int:
    """Mode for path: keep an existing file's mode, else the umask default."""
    try:
        return path.stat().st_mode & 0o777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _atomic_write(path: Path, text: str, newline: str | None = None) -> Path:
    """Write text to a temp file beside path, then replace path with it."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = _file_mode(path)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise IoFailureError(f"Could not write {path}: {e}") from e
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, newline=newline) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600 files
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException as e:
        Path(tmp_name).unlink(missing_ok=True)
        if isinstance(e, OSError):
            raise IoFailureError(f"Could not write {path}: {e}") from e
        raise
    return path


def save(store: Store, path: Path) -> Path:
    """
    Write the store to path as the canonical document, replacing prior content.

    Raises:
        IoFailureError: If the file cannot be written.
    """
    written = _atomic_write(Path(path), dumps_document(store))
    logger.debug(
        "Saved %d histories (%d entries) to %s",
        len(store.histories),
        store.entry_count,
        written,
    )
    return written


# endregion
# region Export
def _csv_text(entries: Iterable[FlatEntry]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n")
    for entry in entries:
        writer.writerow(entry.as_row())
    return buffer.getvalue()


def export_store(store: Store, path: Path, fmt: "ExportFormat | str") -> Path:
    """
    Export the store to path.

    JSON writes the canonical nested document. CSV writes one
    (history, key, value) row per entry with no header row.

    Raises:
        UnsupportedFormatError: If fmt is not json or csv.
        IoFailureError: If the file cannot be written.
    """
    fmt = ExportFormat.from_name(fmt)
    path = Path(path)
    if fmt is ExportFormat.JSON:
        written = _atomic_write(path, dumps_document(store))
    else:
        # csv writes its own \r\n terminators; disable newline translation
        written = _atomic_write(path, _csv_text(store.flatten()), newline="")
    logger.info(
        "Exported %d entries as %s to %s", store.entry_count, fmt.value, written
    )
    return written


# endregion
# region Import
def _widen_csv_field_limit() -> None:
    """Lift the csv module's 128 KiB per-field cap; values have no length limit."""
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            # C long is 32 bits on some platforms
            limit //= 2


def _import_csv(path: Path) -> list[FlatEntry]:
    entries: list[FlatEntry] = []
    _widen_csv_field_limit()
    try:
        with path.open("r", encoding=ENCODING, newline="") as f:
            reader = csv.reader(f, strict=True)
            for row in reader:
                if len(row) != CSV_FIELDS:
                    raise CorruptDataError(
                        f"{path}, line {reader.line_num}: expected {CSV_FIELDS} "
                        f"fields (history, key, value), found {len(row)}."
                    )
                history, key, value = row
                entries.append(FlatEntry(history=history, key=key, value=value))
    except csv.Error as e:
        raise CorruptDataError(f"{path} is not valid CSV: {e}") from e
    except UnicodeDecodeError as e:
        raise CorruptDataError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise IoFailureError(f"Could not read {path}: {e}") from e
    return entries


def _import_json(path: Path) -> list[FlatEntry]:
    return list(_parse_document(_read_text(path), path).flatten())


def import_entries(path: Path, fmt: "ExportFormat | str") -> list[FlatEntry]:
    """
    Parse an exported file into FlatEntry triples, in file order.

    Raises:
        UnsupportedFormatError: If fmt is not json or csv.
        CorruptDataError: If a CSV row does not have exactly three fields or the
            JSON document is not {history: {key: value}}.
        IoFailureError: If the file cannot be read.
    """
    fmt = ExportFormat.from_name(fmt)
    path = Path(path)
    if fmt is ExportFormat.JSON:
        entries = _import_json(path)
    else:
        entries = _import_csv(path)
    logger.info("Read %d entries as %s from %s", len(entries), fmt.value, path)
    return entries


# endregion

__all__ = [
    "ExportFormat",
    "dumps_document",
    "load",
    "load_or_empty",
    "save",
    "export_store",
    "import_entries",
]

# region Docstring
"""
clipstash.app
Application controller: the operations behind every menu action and CLI command.
Overview:
- ClipStashApp owns the Store handle, the store file path, a clipboard gateway,
    and an interaction shell. Each mutating operation changes the Store and then
    persists it before returning.
- The interactive loop offers Save, Load, List, Search, Delete, Export, Import
    and Quit.
Contents:
- Enums:
    - Action: The menu actions, in menu order.
    - TransferChoice: CSV / JSON / Exit options offered by Export and Import.
- Classes:
    - ClipStashApp:
        Methods:
            - open(settings, shell, clipboard) -> ClipStashApp (classmethod)
            - persist() -> Path
            - save_entry(history, key, value) / capture(history, key)
            - recall(history, key) -> str
            - remove(history, key) -> str
            - find(term) -> SearchResult
            - export(path, fmt) -> Path
            - import_file(path, fmt) -> MergeReport
            - run_action(action) -> bool
            - run() -> int
Design Notes:
- A failed write after a successful in-memory change raises PersistError, which
    the loop reports separately from the failure of the change itself.
- ClipStashError subclasses are reported to the user and the loop continues;
    anything else is logged with its traceback and re-raised.
"""
# endregion
# region Imports
import logging
from enum import StrEnum
from logging import Logger as T_Logger
from pathlib import Path

from clipstash.clipboard import ClipboardGateway
from clipstash.config import StoreSettings
from clipstash.errors import (
    ClipStashError,
    InvalidInputError,
    IoFailureError,
    PersistError,
    UserCancelledError,
)
from clipstash.models import Store
from clipstash.render import search_table, store_table
from clipstash.services import codec
from clipstash.services.codec import ExportFormat
from clipstash.services.merge import MergeReport, merge
from clipstash.services.search import SearchResult, search
from clipstash.shell import InteractionShell

# endregion

logger = logging.getLogger(__name__)


# region Enums
class Action(StrEnum):
    SAVE = "Save"
    LOAD = "Load"
    LIST = "List"
    SEARCH = "Search"
    DELETE = "Delete"
    EXPORT = "Export"
    IMPORT = "Import"
    QUIT = "Quit"


class TransferChoice(StrEnum):
    CSV = "CSV"
    JSON = "JSON"
    EXIT = "Exit"


# endregion
# region ClipStashApp
class ClipStashApp:
    __logger: T_Logger

    def __init__(
        self,
        store_path: Path,
        shell: InteractionShell,
        clipboard: ClipboardGateway,
        store: Store | None = None,
    ) -> None:
        self.store_path = Path(store_path)
        self.shell = shell
        self.clipboard = clipboard
        self.store = store if store is not None else codec.load_or_empty(store_path)
        self.__logger = logger.getChild(self.__class__.__name__)

    @classmethod
    def open(
        cls,
        settings: StoreSettings,
        shell: InteractionShell,
        clipboard: ClipboardGateway,
    ) -> "ClipStashApp":
        """Load the configured store file (or start empty) and build the app."""
        app = cls(settings.store_path, shell, clipboard)
        app.store.current = settings.default_history
        app.__logger.info(
            "Opened %s with %d histories", app.store_path, len(app.store.histories)
        )
        return app

    # region Operations
    def persist(self) -> Path:
        """
        Write the whole store to the store file.

        Raises:
            PersistError: If the write fails. The in-memory store is unchanged
                and calling persist() again is safe.
        """
        try:
            return codec.save(self.store, self.store_path)
        except IoFailureError as e:
            self.__logger.error("Failed to persist store: %s", e)
            raise PersistError(
                f"Changes are kept in memory but were not written to "
                f"{self.store_path}: {e}. Retry saving."
            ) from e

    @staticmethod
    def _require(label: str, value: str) -> str:
        if not value:
            raise InvalidInputError(f"{label} cannot be empty.")
        return value

    def save_entry(self, history: str, key: str, value: str) -> None:
        """Store value under history/key and persist."""
        self._require("History name", history)
        self._require("Key", key)
        self.store.save_entry(history, key, value)
        self.__logger.info("Saved key %r in history %r", key, history)
        self.persist()

    def capture(self, history: str, key: str) -> str:
        """Save the current clipboard contents under history/key."""
        self._require("History name", history)
        self._require("Key", key)
        value = self.clipboard.read()
        self.save_entry(history, key, value)
        return value

    def recall(self, history: str, key: str) -> str:
        """Copy a saved value to the clipboard and select its history."""
        value = self.store.get_entry(history, key)
        self.store.select(history)
        self.clipboard.write(value)
        self.__logger.info("Copied key %r from history %r", key, history)
        return value

    def remove(self, history: str, key: str) -> str:
        """Delete history/key and persist. Returns the removed value."""
        value = self.store.delete_entry(history, key)
        self.__logger.info("Deleted key %r from history %r", key, history)
        self.persist()
        return value

    def find(self, term: str) -> SearchResult:
        return search(self.store, term)

    def export(self, path: Path, fmt: ExportFormat | str) -> Path:
        return codec.export_store(self.store, path, fmt)

    def import_file(self, path: Path, fmt: ExportFormat | str) -> MergeReport:
        """Merge an exported file into the store and persist."""
        entries = codec.import_entries(path, fmt)
        report = merge(self.store, entries)
        self.persist()
        return report

    # endregion
    # region Interactive Actions
    def _choose_history(self, label: str) -> str | None:
        names = list(self.store.list_histories())
        if not names:
            self.shell.info("No clipboard histories saved yet.")
            return None
        return names[self.shell.prompt_choice(label, names)]

    def _choose_key(self, history: str, label: str) -> str | None:
        keys = [key for key, _ in self.store.list_entries(history)]
        if not keys:
            self.shell.info(f"Clipboard history '{history}' has no entries.")
            return None
        return keys[self.shell.prompt_choice(label, keys)]

    def action_save(self) -> None:
        history = self.shell.prompt_text("Enter clipboard history name")
        value = self.clipboard.read()
        key = self.shell.prompt_text("Enter key")
        self.save_entry(history, key, value)
        self.shell.info(f"Data saved to clipboard history: {history}")

    def action_load(self) -> None:
        history = self._choose_history("Select a clipboard history to load:")
        if history is None:
            return
        self.store.select(history)
        key = self._choose_key(history, "Select a key to load:")
        if key is None:
            return
        self.recall(history, key)
        self.shell.info("Data copied to clipboard.")

    def action_list(self) -> None:
        if self.store.is_empty:
            self.shell.info("No clipboard histories saved yet.")
            return
        self.shell.show(store_table(self.store))

    def action_search(self) -> None:
        term = self.shell.prompt_text("Enter a search term")
        result = self.find(term)
        if result.is_empty:
            self.shell.info(result.message())
        else:
            self.shell.show(search_table(result))

    def action_delete(self) -> None:
        history = self._choose_history("Select a clipboard history to delete from:")
        if history is None:
            return
        key = self._choose_key(history, "Select a key to delete:")
        if key is None:
            return
        self.remove(history, key)
        self.shell.info(f"Key deleted from clipboard history: {history}")

    def _choose_transfer(self, label: str) -> ExportFormat | None:
        options = list(TransferChoice)
        choice = options[self.shell.prompt_choice(label, [str(o) for o in options])]
        if choice is TransferChoice.EXIT:
            return None
        return ExportFormat.from_name(choice.value)

    def action_export(self) -> None:
        fmt = self._choose_transfer("Export data as:")
        if fmt is None:
            self.shell.info("Export cancelled.")
            return
        filename = self.shell.prompt_text(
            f"Enter the filename for {fmt.value.upper()} export"
        )
        self.export(Path(filename), fmt)
        self.shell.info(f"Clipboard data exported to {filename}.")

    def action_import(self) -> None:
        fmt = self._choose_transfer("Import data from:")
        if fmt is None:
            self.shell.info("Import cancelled.")
            return
        filename = self.shell.prompt_text(
            f"Enter the filename for {fmt.value.upper()} import"
        )
        report = self.import_file(Path(filename), fmt)
        self.shell.info(f"Data imported from {filename} ({report.summary()}).")

    def action_quit(self) -> None:
        self.persist()
        self.shell.info("Data saved before quitting.")

    # endregion
    # region Loop
    def run_action(self, action: Action) -> bool:
        """
        Run one menu action and report any failure to the user.

        Returns:
            bool: False when the loop should stop (Quit succeeded).
        """
        handler = getattr(self, f"action_{action.name.lower()}")
        try:
            handler()
        except UserCancelledError:
            self.shell.info("Cancelled.")
        except PersistError as e:
            self.__logger.warning(
                "%s action changed the store but not the file", action
            )
            self.shell.error(str(e))
        except ClipStashError as e:
            self.__logger.warning("%s action failed: %s", action, e)
            self.shell.error(str(e))
        except Exception as e:
            self.__logger.exception("Unexpected failure in %s action: %s", action, e)
            raise
        else:
            return action is not Action.QUIT
        return True

    def run(self) -> int:
        """Show the action menu until Quit. Returns the process exit status."""
        actions = list(Action)
        labels = [str(a) for a in actions]
        while True:
            try:
                choice = self.shell.prompt_choice("Select an action:", labels)
            except UserCancelledError:
                # Ctrl-C or end of input at the menu quits, even if saving fails.
                return 1 if self.run_action(Action.QUIT) else 0
            # A Quit that could not persist keeps the loop going so it can be retried.
            if not self.run_action(actions[choice]):
                return 0

    # endregion


# endregion

__all__ = ["Action", "TransferChoice", "ClipStashApp"]

"""
rich tables for the List and Search actions.
"""

from rich import box
from rich.table import Table
from rich.text import Text

from clipstash.models import Store
from clipstash.services.search import SearchResult

COLUMNS = ("History", "Key", "Value")


def _table(title: Text | None = None) -> Table:
    table = Table(title=title, box=box.SQUARE, show_lines=False, highlight=False)
    for column in COLUMNS:
        table.add_column(column, overflow="fold")
    return table


# Cells are Text so stored values are never parsed as console markup.
def store_table(store: Store, history_name: str | None = None) -> Table:
    """
    One row per history name followed by a row per entry.

    If history_name is given only that history is shown; the caller is expected
    to have checked that it exists.
    """
    table = _table()
    names = [history_name] if history_name is not None else store.list_histories()
    for name in names:
        table.add_row(Text(name), "", "", style="bold")
        for key, value in store.list_entries(name):
            table.add_row("", Text(key), Text(value))
    return table


def search_table(result: SearchResult) -> Table:
    """One row per matching entry."""
    table = _table(title=Text(f"Results for {result.term!r}"))
    for name, entries in result.matches.items():
        for key, value in entries.items():
            table.add_row(Text(name), Text(key), Text(value))
    return table


__all__ = ["store_table", "search_table"]

# region Docstring
"""
clipstash.services.search
Case-sensitive substring search over history names, keys, and values.
Overview:
- An entry matches when the term occurs in its history's name, its key, or its
    value. Only matching entries are returned, grouped by history.
- The result records whether the store was empty so "nothing saved yet" and
    "no results" can be reported differently.
Contents:
- Pydantic models:
    - SearchResult: matches grouped by history plus the term and store_empty flag.
- Functions:
    - search(store, term) -> SearchResult
"""
# endregion
# region Imports
import logging

from pydantic import BaseModel, Field

from clipstash.errors import InvalidInputError
from clipstash.models import Document, Store

# endregion

logger = logging.getLogger(__name__)


class SearchResult(BaseModel):
    """
    Entries that matched a search term.

    Attributes:
        term (str): The search term.
        matches (dict[str, dict[str, str]]): history -> key -> value for every
            matching entry. Histories without a match are absent.
        store_empty (bool): True when the searched store had no histories.
    """

    term: str
    matches: Document = Field(default_factory=dict)
    store_empty: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.matches

    @property
    def match_count(self) -> int:
        return sum(len(entries) for entries in self.matches.values())

    def message(self) -> str:
        """The user-facing summary line for this result."""
        if self.store_empty:
            return "The clipboard store is empty; nothing to search."
        if self.is_empty:
            return f"No results found for search term: {self.term}"
        return f"{self.match_count} matches for search term: {self.term}"


def search(store: Store, term: str) -> SearchResult:
    """
    Find entries whose history name, key, or value contains term.

    Raises:
        InvalidInputError: If term is empty.
    """
    if not term:
        raise InvalidInputError("Search term cannot be empty.")
    matches: Document = {}
    for name, history in store.histories.items():
        name_matches = term in name
        for key, value in history.entries.items():
            if name_matches or term in key or term in value:
                matches.setdefault(name, {})[key] = value
    result = SearchResult(term=term, matches=matches, store_empty=store.is_empty)
    logger.debug("Search for %r matched %d entries", term, result.match_count)
    return result


__all__ = ["SearchResult", "search"]

"""
clipstash.services
Operations over the Store: persistence, merging imports, and search.
"""

from . import codec  # noqa: F401
from .codec import ExportFormat  # noqa: F401
from .merge import MergeReport, merge  # noqa: F401
from .search import SearchResult, search  # noqa: F401

__all__ = ["codec", "ExportFormat", "MergeReport", "merge", "SearchResult", "search"]

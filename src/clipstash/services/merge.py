# region Docstring
"""
clipstash.services.merge
Merge imported (history, key, value) triples into an existing Store.
Overview:
- Records are applied strictly in the order given. Imported values always win
    over existing ones, and within one import a later record for the same
    (history, key) overwrites an earlier one.
- Each applied record is classified the same way the importers report their
    progress: "Created" for a new key, "Updated" for a changed value and
    "Unchanged" when the stored value already matched.
Contents:
- Pydantic models:
    - MergeReport: counts of created/updated/unchanged entries and new histories.
- Functions:
    - merge(store, imported) -> MergeReport
Design notes:
- merge() mutates the Store it is given and never persists; the caller saves.
- The result depends only on the import order and the pre-existing contents, not
    on the iteration order of the Store's dictionaries.
"""
# endregion
# region Imports
import logging
from typing import Iterable

from pydantic import BaseModel, Field

from clipstash.models import FlatEntry, Store

# endregion

logger = logging.getLogger(__name__)


# region MergeReport Model
class MergeReport(BaseModel):
    """
    Summary of a merge.

    Attributes:
        created (int): Keys that did not exist before.
        updated (int): Keys whose value was replaced by a different value.
        unchanged (int): Records whose value matched what was stored.
        histories_created (list[str]): Histories created by the merge, in order.
    """

    created: int = Field(0, description="Keys added by the merge")
    updated: int = Field(0, description="Keys overwritten with a new value")
    unchanged: int = Field(0, description="Records identical to stored values")
    histories_created: list[str] = Field(
        default_factory=list, description="Histories created by the merge"
    )

    @property
    def total(self) -> int:
        """Number of records applied."""
        return self.created + self.updated + self.unchanged

    @property
    def changed(self) -> bool:
        return bool(self.created or self.updated or self.histories_created)

    def summary(self) -> str:
        text = (
            f"{self.total} records: {self.created} created, "
            f"{self.updated} updated, {self.unchanged} unchanged"
        )
        if self.histories_created:
            text += f"; new histories: {', '.join(self.histories_created)}"
        return text


# endregion
# region Merge
def merge(store: Store, imported: Iterable[FlatEntry]) -> MergeReport:
    """
    Apply imported triples to store, in order. Imported values win.

    Arguments:
        store (Store): The store to update in place.
        imported (Iterable[FlatEntry]): Records in their source order.

    Returns:
        MergeReport: What the merge did.
    """
    report = MergeReport()
    for record in imported:
        if not store.has_history(record.history):
            report.histories_created.append(record.history)
        history = store.history(record.history)
        previous = history.put(record.key, record.value)
        if previous is None:
            report.created += 1
        elif previous != record.value:
            report.updated += 1
        else:
            report.unchanged += 1
    logger.info("Merged import: %s", report.summary())
    return report


# endregion

__all__ = ["MergeReport", "merge"]

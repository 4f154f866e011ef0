from clipstash.models import FlatEntry, Store
from clipstash.services.merge import MergeReport, merge


def _entries(*triples):
    return [FlatEntry(history=h, key=k, value=v) for h, k, v in triples]


class TestMerge:
    """Tests for the merge engine."""

    def test_import_overrides_existing(self):
        store = Store()
        store.save_entry("a", "x", "old")
        report = merge(store, _entries(("a", "x", "new")))
        assert store.get_entry("a", "x") == "new"
        assert report.updated == 1
        assert report.created == 0

    def test_creates_missing_histories(self):
        store = Store()
        report = merge(
            store, _entries(("a", "x", "1"), ("b", "y", "2"), ("a", "z", "3"))
        )
        assert store.to_document() == {"a": {"x": "1", "z": "3"}, "b": {"y": "2"}}
        assert report.histories_created == ["a", "b"]
        assert report.created == 3

    def test_later_duplicate_wins(self):
        store = Store()
        merge(store, _entries(("a", "x", "first"), ("a", "x", "second")))
        assert store.get_entry("a", "x") == "second"

    def test_keeps_unrelated_entries(self, sample_store):
        merge(sample_store, _entries(("work", "new", "value")))
        assert sample_store.get_entry("work", "snippet") == "echo hi"
        assert sample_store.get_entry("work", "new") == "value"
        assert sample_store.has_history("archive")

    def test_independent_of_existing_order(self):
        forward, backward = Store(), Store()
        for name in ["a", "b", "c"]:
            forward.save_entry(name, "k", name)
        for name in ["c", "b", "a"]:
            backward.save_entry(name, "k", name)
        imported = _entries(("b", "k", "new"), ("d", "k", "d"), ("a", "j", "j"))
        merge(forward, imported)
        merge(backward, imported)
        assert forward == backward

    def test_unchanged_records(self, sample_store):
        report = merge(sample_store, _entries(("work", "snippet", "echo hi")))
        assert report.unchanged == 1
        assert not report.changed
        assert report.total == 1

    def test_empty_import(self, sample_store):
        before = Store.from_document(sample_store.to_document())
        report = merge(sample_store, [])
        assert report == MergeReport()
        assert sample_store == before

    def test_summary(self):
        report = MergeReport(created=2, updated=1, histories_created=["a"])
        assert report.summary() == (
            "3 records: 2 created, 1 updated, 0 unchanged; new histories: a"
        )

import pytest

from clipstash.errors import InvalidInputError
from clipstash.models import Store
from clipstash.services.search import SearchResult, search


class TestSearch:
    """Tests for substring search."""

    def test_empty_term_is_invalid(self, sample_store):
        with pytest.raises(InvalidInputError):
            search(sample_store, "")

    def test_matches_value(self, sample_store):
        result = search(sample_store, "kubectl")
        assert result.matches == {"work": {"deploy": "kubectl apply -f deploy.yaml"}}

    def test_filters_entries_not_histories(self, sample_store):
        result = search(sample_store, "snippet")
        assert result.matches == {"work": {"snippet": "echo hi"}}

    def test_matches_key(self, sample_store):
        assert search(sample_store, "addr").matches == {
            "personal": {"address": "221B Baker Street\nLondon"}
        }

    def test_history_name_match_returns_its_entries(self, sample_store):
        result = search(sample_store, "pers")
        assert result.matches == {
            "personal": {"address": "221B Baker Street\nLondon", "blank": ""}
        }

    def test_empty_history_never_matches(self, sample_store):
        assert search(sample_store, "archive").is_empty

    def test_case_sensitive(self, sample_store):
        assert search(sample_store, "ECHO").is_empty
        assert not search(sample_store, "echo").is_empty

    def test_no_match_is_distinct_from_empty_store(self, sample_store):
        no_match = search(sample_store, "zz")
        empty = search(Store(), "zz")
        assert no_match.is_empty and empty.is_empty
        assert not no_match.store_empty
        assert empty.store_empty
        assert no_match.message() != empty.message()
        assert no_match.message() == "No results found for search term: zz"

    def test_match_count(self, sample_store):
        # snippet and deploy by key, both personal entries by history name
        result = search(sample_store, "e")
        assert result.match_count == 4
        assert search(sample_store, "kubectl").match_count == 1
        assert isinstance(result, SearchResult)

    def test_does_not_mutate_store(self, sample_store):
        before = sample_store.to_document()
        search(sample_store, "work")
        assert sample_store.to_document() == before

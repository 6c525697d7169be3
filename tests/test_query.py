"""
Tests for the query pipeline.
"""

import pytest

from docstore.engine.query import QueryResult, paginate, run_query
from docstore.models.exceptions import InvalidOrderBy
from docstore.models.filters import AnyFilter, EqFilter, GtFilter
from docstore.models.order_by import AndOrder, Asc, Desc


def ids(entries):
    return [doc_id for doc_id, _ in entries]


class TestRunQuery:
    """Tests for run_query."""

    def test_filter_keeps_scan_order(self, sample_docs):
        """Test filtering alone does not reorder."""
        result = run_query(sample_docs, EqFilter("group", 1))
        assert ids(result) == ["b", "d", "e"]

    def test_filter_soundness(self, sample_docs):
        """Test exactly the matching entries are returned."""
        flt = GtFilter("rank", 2)
        expected = [doc_id for doc_id, doc in sample_docs if flt.match(doc, doc_id)]
        assert ids(run_query(sample_docs, flt)) == expected

    def test_sorted(self, sample_docs):
        """Test ordering with tie-breaking."""
        result = run_query(sample_docs, AnyFilter(), order_by=AndOrder(Asc("group"), Desc("rank")))
        assert ids(result) == ["b", "d", "e", "c", "a"]

    def test_case_insensitive_order(self):
        """Test names sort case-insensitively."""
        entries = [("1", {"name": "Banana"}), ("2", {"name": "apple"})]
        result = run_query(entries, AnyFilter(), order_by=Asc("name"))
        assert [doc["name"] for _, doc in result] == ["apple", "Banana"]

    def test_empty_input(self):
        """Test empty collections produce empty results."""
        assert run_query([], AnyFilter(), skip=3, limit=2, order_by=Asc("x")) == []

    def test_invalid_order_by_on_empty_result(self):
        """Test an invalid OrderBy fails even when nothing matches."""
        with pytest.raises(InvalidOrderBy):
            run_query([], AnyFilter(), order_by="name")

    def test_negative_window_rejected(self, sample_docs):
        """Test negative skip or limit raise ValueError."""
        with pytest.raises(ValueError):
            run_query(sample_docs, AnyFilter(), skip=-1)
        with pytest.raises(ValueError):
            run_query(sample_docs, AnyFilter(), limit=-1)


class TestPagination:
    """Tests for skip/limit windows."""

    def test_window_laws(self, sample_docs):
        """Test every window equals the matching slice of the full result."""
        order = AndOrder(Asc("group"), Desc("rank"))
        full = run_query(sample_docs, AnyFilter(), order_by=order)
        n = len(full)

        for k in range(n + 2):
            for m in range(n + 2):
                window = run_query(sample_docs, AnyFilter(), skip=k, limit=m, order_by=order)
                assert window == full[k : min(k + m, n)]

    def test_skip_only(self, sample_docs):
        """Test skip without limit returns the rest."""
        assert ids(paginate(sample_docs, 3, None)) == ["d", "e"]

    def test_limit_only(self, sample_docs):
        """Test limit without skip starts at zero."""
        assert ids(paginate(sample_docs, None, 2)) == ["a", "b"]

    def test_skip_beyond_end(self, sample_docs):
        """Test skipping past the end is empty, not an error."""
        assert paginate(sample_docs, 10, None) == []
        assert paginate(sample_docs, 5, 1) == []

    def test_limit_zero(self, sample_docs):
        """Test a zero limit yields nothing."""
        assert paginate(sample_docs, 0, 0) == []


class TestQueryResult:
    """Tests for the forward-only result iterator."""

    def test_yields_projection(self, sample_docs):
        """Test items are projected from entries."""
        result = QueryResult(sample_docs[:2], lambda entry: entry[0])
        assert list(result) == ["a", "b"]

    def test_forward_only(self, sample_docs):
        """Test a consumed result stays exhausted."""
        result = QueryResult(sample_docs, lambda entry: entry[0])
        assert next(result) == "a"
        assert len(list(result)) == 4
        assert list(result) == []

    def test_iter_returns_self(self, sample_docs):
        """Test iter() does not restart."""
        result = QueryResult(sample_docs, lambda entry: entry[0])
        assert iter(result) is result
        assert result.__length_hint__() == 5

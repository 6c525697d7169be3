"""
Tests for filter variants.
"""

import copy

import pytest

from docstore.interfaces.filter import Filter
from docstore.models.filters import (
    AndFilter,
    AnyFilter,
    AnyOfDocIdFilter,
    AnyOfFilter,
    DocIdFilter,
    EqFilter,
    ExistsFilter,
    GteFilter,
    GtFilter,
    InArrayFilter,
    LikeFilter,
    LteFilter,
    LtFilter,
    NotFilter,
    OrFilter,
    _CompareFilter,
)

DOC = {
    "name": "Alice Cooper",
    "age": 30,
    "nickname": None,
    "address": {"city": "Berlin"},
    "tags": ["admin", "ops"],
}


class TestFieldFilters:
    """Tests for filters that inspect a single field."""

    def test_any_filter(self):
        """Test AnyFilter matches everything."""
        assert AnyFilter().match({}, "x")
        assert AnyFilter().match(DOC, "1")

    def test_eq_filter(self):
        """Test equality on top-level and nested fields."""
        assert EqFilter("age", 30).match(DOC, "1")
        assert EqFilter("address.city", "Berlin").match(DOC, "1")
        assert not EqFilter("age", 31).match(DOC, "1")

    def test_eq_filter_missing_vs_none(self):
        """Test a missing field never equals None, a stored None does."""
        assert EqFilter("nickname", None).match(DOC, "1")
        assert not EqFilter("surname", None).match(DOC, "1")

    def test_exists_filter(self):
        """Test ExistsFilter treats stored None as present."""
        assert ExistsFilter("nickname").match(DOC, "1")
        assert ExistsFilter("address.city").match(DOC, "1")
        assert not ExistsFilter("address.zip").match(DOC, "1")

    def test_any_of_filter(self):
        """Test AnyOfFilter membership."""
        assert AnyOfFilter("age", [25, 30]).match(DOC, "1")
        assert not AnyOfFilter("age", [25, 35]).match(DOC, "1")
        assert not AnyOfFilter("missing", [None]).match(DOC, "1")

    def test_in_array_filter(self):
        """Test InArrayFilter looks inside list fields only."""
        assert InArrayFilter("tags", "ops").match(DOC, "1")
        assert not InArrayFilter("tags", "dev").match(DOC, "1")
        # A string field is not an array
        assert not InArrayFilter("name", "Alice").match(DOC, "1")

    @pytest.mark.parametrize(
        "flt, expected",
        [
            (GtFilter("age", 29), True),
            (GtFilter("age", 30), False),
            (GteFilter("age", 30), True),
            (LtFilter("age", 31), True),
            (LtFilter("age", 30), False),
            (LteFilter("age", 30), True),
        ],
    )
    def test_compare_filters(self, flt, expected):
        """Test range comparisons."""
        assert flt.match(DOC, "1") is expected

    def test_compare_base_is_abstract(self):
        """Test the shared comparison base cannot be instantiated."""
        with pytest.raises(TypeError):
            _CompareFilter("age", 1)

    def test_compare_filters_skip_missing_and_incomparable(self):
        """Test range comparisons never match missing, None or wrong types."""
        assert not GtFilter("missing", 0).match(DOC, "1")
        assert not GtFilter("nickname", 0).match(DOC, "1")
        assert not LtFilter("name", 10).match(DOC, "1")

    def test_like_filter(self):
        """Test case-insensitive wildcard matching."""
        assert LikeFilter("name", "%cooper").match(DOC, "1")
        assert LikeFilter("name", "alice%").match(DOC, "1")
        assert LikeFilter("name", "%CE CO%").match(DOC, "1")
        assert LikeFilter("name", "alice cooper").match(DOC, "1")
        assert not LikeFilter("name", "alice").match(DOC, "1")
        assert not LikeFilter("age", "30").match(DOC, "1")

    def test_like_filter_escapes_regex(self):
        """Test regex metacharacters in the pattern are literal."""
        doc = {"file": "report.v1.pdf"}
        assert LikeFilter("file", "%.v1.%").match(doc, "1")
        assert not LikeFilter("file", "report_v1%").match(doc, "1")


class TestIdFilters:
    """Tests for filters on the document id."""

    def test_doc_id_filter(self):
        """Test DocIdFilter compares the id, not the body."""
        assert DocIdFilter("1").match(DOC, "1")
        assert not DocIdFilter("1").match(DOC, "2")

    def test_any_of_doc_id_filter(self):
        """Test AnyOfDocIdFilter membership."""
        flt = AnyOfDocIdFilter(["1", "3"])
        assert flt.match(DOC, "3")
        assert not flt.match(DOC, "2")


class TestCompositeFilters:
    """Tests for and/or/not combinators."""

    def test_and_filter(self):
        """Test AndFilter requires every child."""
        assert AndFilter(EqFilter("age", 30), ExistsFilter("tags")).match(DOC, "1")
        assert not AndFilter(EqFilter("age", 30), ExistsFilter("zip")).match(DOC, "1")

    def test_or_filter(self):
        """Test OrFilter requires any child."""
        assert OrFilter(EqFilter("age", 1), EqFilter("age", 30)).match(DOC, "1")
        assert not OrFilter(EqFilter("age", 1), EqFilter("age", 2)).match(DOC, "1")

    def test_not_filter(self):
        """Test NotFilter negates."""
        assert NotFilter(ExistsFilter("zip")).match(DOC, "1")
        assert not NotFilter(AnyFilter()).match(DOC, "1")

    def test_empty_combinators_rejected(self):
        """Test and/or need at least one child."""
        with pytest.raises(ValueError):
            AndFilter()
        with pytest.raises(ValueError):
            OrFilter()

    def test_operators(self):
        """Test &, | and ~ build combinators."""
        adult = GteFilter("age", 18)
        admin = InArrayFilter("tags", "admin")

        assert (adult & admin) == AndFilter(adult, admin)
        assert (adult | admin) == OrFilter(adult, admin)
        assert ~adult == NotFilter(adult)
        assert not (~adult).match(DOC, "1")

    def test_filters_are_filters(self):
        """Test every variant implements the Filter interface."""
        assert isinstance(EqFilter("a", 1), Filter)
        assert isinstance(AndFilter(AnyFilter()), Filter)

    def test_match_does_not_mutate(self):
        """Test evaluation leaves the document untouched."""
        doc = copy.deepcopy(DOC)
        flt = AndFilter(
            LikeFilter("name", "%a%"),
            OrFilter(InArrayFilter("tags", "ops"), GtFilter("age", 1)),
            NotFilter(ExistsFilter("address.zip")),
        )
        assert flt.match(doc, "1")
        assert doc == DOC

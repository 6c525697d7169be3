"""
Concrete filter variants.

Field-based filters resolve their field with a dotted path. A field that does
not resolve never matches, except through ExistsFilter/NotFilter.
"""

import re
from abc import abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from docstore.interfaces.filter import Filter
from docstore.models.document import NOT_SET, get_field


@dataclass(frozen=True)
class AnyFilter(Filter):
    """Matches every document."""

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        return True


@dataclass(frozen=True)
class EqFilter(Filter):
    field: str
    value: Any

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        found = get_field(doc, self.field)
        if found is NOT_SET:
            return False
        return found == self.value


@dataclass(frozen=True)
class ExistsFilter(Filter):
    field: str

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        return get_field(doc, self.field) is not NOT_SET


@dataclass(frozen=True, init=False)
class AnyOfFilter(Filter):
    """Matches when the field value equals one of the given values."""

    field: str
    values: tuple[Any, ...]

    def __init__(self, field: str, values: Sequence[Any]) -> None:
        object.__setattr__(self, "field", field)
        object.__setattr__(self, "values", tuple(values))

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        found = get_field(doc, self.field)
        if found is NOT_SET:
            return False
        return any(found == value for value in self.values)


@dataclass(frozen=True)
class InArrayFilter(Filter):
    """Matches when the field holds a list that contains the value."""

    field: str
    value: Any

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        found = get_field(doc, self.field)
        if not isinstance(found, Sequence) or isinstance(found, (str, bytes)):
            return False
        return self.value in found


@dataclass(frozen=True)
class _CompareFilter(Filter):
    field: str
    value: Any

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        found = get_field(doc, self.field)
        if found is NOT_SET or found is None:
            return False
        try:
            return self._compare(found)
        except TypeError:
            # Incomparable types (e.g. str vs int) never match
            return False

    @abstractmethod
    def _compare(self, found: Any) -> bool:
        pass


@dataclass(frozen=True)
class GtFilter(_CompareFilter):
    def _compare(self, found: Any) -> bool:
        return found > self.value


@dataclass(frozen=True)
class GteFilter(_CompareFilter):
    def _compare(self, found: Any) -> bool:
        return found >= self.value


@dataclass(frozen=True)
class LtFilter(_CompareFilter):
    def _compare(self, found: Any) -> bool:
        return found < self.value


@dataclass(frozen=True)
class LteFilter(_CompareFilter):
    def _compare(self, found: Any) -> bool:
        return found <= self.value


@dataclass(frozen=True)
class LikeFilter(Filter):
    """
    Case-insensitive pattern match on string fields.

    ``%`` matches any run of characters; everything else is literal. Without a
    wildcard the whole value must match, so ``LikeFilter("name", "%ann%")`` is
    a contains-check and ``LikeFilter("name", "ann%")`` a prefix check.
    """

    field: str
    pattern: str

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        found = get_field(doc, self.field)
        if not isinstance(found, str):
            return False
        regex = ".*".join(re.escape(part) for part in self.pattern.split("%"))
        return re.fullmatch(regex, found, flags=re.IGNORECASE | re.DOTALL) is not None


@dataclass(frozen=True, init=False)
class AndFilter(Filter):
    filters: tuple[Filter, ...]

    def __init__(self, *filters: Filter) -> None:
        if not filters:
            raise ValueError("AndFilter requires at least one filter")
        object.__setattr__(self, "filters", tuple(filters))

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        return all(f.match(doc, doc_id) for f in self.filters)


@dataclass(frozen=True, init=False)
class OrFilter(Filter):
    filters: tuple[Filter, ...]

    def __init__(self, *filters: Filter) -> None:
        if not filters:
            raise ValueError("OrFilter requires at least one filter")
        object.__setattr__(self, "filters", tuple(filters))

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        return any(f.match(doc, doc_id) for f in self.filters)


@dataclass(frozen=True)
class NotFilter(Filter):
    inner: Filter

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        return not self.inner.match(doc, doc_id)


@dataclass(frozen=True)
class DocIdFilter(Filter):
    doc_id: str

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        return doc_id == self.doc_id


@dataclass(frozen=True, init=False)
class AnyOfDocIdFilter(Filter):
    """Matches documents whose id is in the given collection of ids."""

    doc_ids: frozenset[str]

    def __init__(self, doc_ids: Sequence[str] | frozenset[str] | set[str]) -> None:
        object.__setattr__(self, "doc_ids", frozenset(doc_ids))

    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        return doc_id in self.doc_ids

"""
DocumentComparator - total order between documents from an OrderBy tree.
"""

from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any

from docstore.models.document import NOT_SET, get_field
from docstore.models.exceptions import InvalidOrderBy, SortFieldUnresolvable
from docstore.models.order_by import AndOrder, Asc, Desc, OrderBy


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way comparison of two field values.

    Strings compare case-insensitively using Unicode casefolding. None sorts
    before everything else.
    Other values use their natural ordering.

    Raises:
        TypeError: If the values cannot be ordered against each other.
    """
    if isinstance(a, str) and isinstance(b, str):
        a, b = a.casefold(), b.casefold()
    elif a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1

    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class DocumentComparator:
    """
    Compares documents field by field following an OrderBy tree.

    Asc/Desc leaves compare one field; AndOrder(a, b) falls through to ``b``
    only when ``a`` ties. Every field an order touches must resolve on both
    documents, otherwise SortFieldUnresolvable is raised.
    """

    def __init__(self, order_by: OrderBy) -> None:
        """
        Initialize comparator.

        Args:
            order_by: The ordering to apply.

        Raises:
            InvalidOrderBy: If the tree contains an unknown node.
        """
        self._check(order_by)
        self._order_by = order_by

    def _check(self, order_by: Any) -> None:
        if isinstance(order_by, AndOrder):
            self._check(order_by.a)
            self._check(order_by.b)
        elif not isinstance(order_by, (Asc, Desc)):
            raise InvalidOrderBy(order_by)

    def compare(
        self,
        doc_a: Mapping[str, Any],
        doc_b: Mapping[str, Any],
        id_a: str | None = None,
        id_b: str | None = None,
    ) -> int:
        """
        Compare two documents.

        Args:
            doc_a: Left document.
            doc_b: Right document.
            id_a: Id of the left document, used in error messages.
            id_b: Id of the right document, used in error messages.

        Returns:
            -1, 0 or 1.
        """
        return self._compare(self._order_by, doc_a, doc_b, id_a, id_b)

    def _compare(
        self,
        order_by: OrderBy,
        doc_a: Mapping[str, Any],
        doc_b: Mapping[str, Any],
        id_a: str | None,
        id_b: str | None,
    ) -> int:
        if isinstance(order_by, AndOrder):
            result = self._compare(order_by.a, doc_a, doc_b, id_a, id_b)
            if result != 0:
                return result
            return self._compare(order_by.b, doc_a, doc_b, id_a, id_b)

        if not isinstance(order_by, (Asc, Desc)):
            raise InvalidOrderBy(order_by)

        val_a = self._field_value(doc_a, order_by.field, id_a)
        val_b = self._field_value(doc_b, order_by.field, id_b)

        try:
            result = compare_values(val_a, val_b)
        except TypeError as e:
            raise SortFieldUnresolvable(
                order_by.field,
                reason=(
                    f"cannot order {type(val_a).__name__} against "
                    f"{type(val_b).__name__} (docs {id_a!r}, {id_b!r})"
                ),
            ) from e

        return -result if isinstance(order_by, Desc) else result

    @staticmethod
    def _field_value(doc: Mapping[str, Any], field: str, doc_id: str | None) -> Any:
        value = get_field(doc, field)
        if value is NOT_SET:
            raise SortFieldUnresolvable(field, doc_id=doc_id)
        return value

    def sort(
        self, entries: list[tuple[str, Mapping[str, Any]]]
    ) -> list[tuple[str, Mapping[str, Any]]]:
        """
        Stable sort of ``(doc_id, doc)`` pairs.

        Entries that compare equal keep their relative input order.
        """
        return sorted(
            entries,
            key=cmp_to_key(lambda x, y: self.compare(x[1], y[1], x[0], y[0])),
        )


def compare_docs(doc_a: Mapping[str, Any], doc_b: Mapping[str, Any], order_by: OrderBy) -> int:
    """Compare two documents under ``order_by``. Returns -1, 0 or 1."""
    return DocumentComparator(order_by).compare(doc_a, doc_b)

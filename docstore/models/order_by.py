"""
OrderBy variants: a closed set of Asc, Desc and AndOrder.
"""

from dataclasses import dataclass

from docstore.models.document import split_path


@dataclass(frozen=True)
class Asc:
    """Order by a field, smallest first."""

    field: str

    def __post_init__(self) -> None:
        split_path(self.field)


@dataclass(frozen=True)
class Desc:
    """Order by a field, largest first."""

    field: str

    def __post_init__(self) -> None:
        split_path(self.field)


@dataclass(frozen=True)
class AndOrder:
    """
    Order by ``a``; documents that tie on ``a`` are ordered by ``b``.

    ``b`` may itself be an AndOrder, so chains of any depth are possible.
    """

    a: "OrderBy"
    b: "OrderBy"

    @classmethod
    def by(cls, first: "OrderBy", second: "OrderBy", *rest: "OrderBy") -> "AndOrder":
        """
        Build a right-nested chain from two or more orders.

        ``AndOrder.by(x, y, z)`` is ``AndOrder(x, AndOrder(y, z))``.
        """
        orders = [first, second, *rest]
        chain = AndOrder(orders[-2], orders[-1])
        for order in reversed(orders[:-2]):
            chain = AndOrder(order, chain)
        return chain


OrderBy = Asc | Desc | AndOrder

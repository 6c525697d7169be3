"""
Index declarations.

The in-memory store records these as collection metadata only. They never
enforce uniqueness and never accelerate lookups.
"""

from dataclasses import dataclass
from enum import IntEnum


class Sort(IntEnum):
    """Sort direction of an indexed field."""

    ASC = 1
    DESC = -1


@dataclass(frozen=True)
class IndexField:
    field: str
    sort: Sort = Sort.ASC


@dataclass(frozen=True)
class FieldIndex:
    """Index over a single field."""

    field: str
    sort: Sort = Sort.ASC
    unique: bool = False
    name: str | None = None

    @property
    def index_name(self) -> str:
        return self.name or f"{self.field}_{int(self.sort)}"


@dataclass(frozen=True, init=False)
class MultiFieldIndex:
    """Composite index over two or more fields."""

    fields: tuple[IndexField, ...]
    unique: bool
    name: str | None

    def __init__(
        self,
        fields: list[IndexField | str] | tuple[IndexField | str, ...],
        unique: bool = False,
        name: str | None = None,
    ) -> None:
        normalized = tuple(
            f if isinstance(f, IndexField) else IndexField(f) for f in fields
        )
        if len(normalized) < 2:
            raise ValueError(
                f"MultiFieldIndex needs at least 2 fields, got {len(normalized)}"
            )
        object.__setattr__(self, "fields", normalized)
        object.__setattr__(self, "unique", unique)
        object.__setattr__(self, "name", name)

    @property
    def index_name(self) -> str:
        return self.name or "_".join(f"{f.field}_{int(f.sort)}" for f in self.fields)


Index = FieldIndex | MultiFieldIndex

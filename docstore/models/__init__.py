"""
Data models for the document store.
"""

from docstore.models.connection import InMemoryConnection
from docstore.models.document import NOT_SET, get_field, has_field
from docstore.models.exceptions import (
    DocumentNotFound,
    DocumentStoreError,
    DuplicateKey,
    InvalidOrderBy,
    SortFieldUnresolvable,
    UnknownCollection,
)
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
)
from docstore.models.index import FieldIndex, Index, IndexField, MultiFieldIndex, Sort
from docstore.models.order_by import AndOrder, Asc, Desc, OrderBy

__all__ = [
    "InMemoryConnection",
    "NOT_SET",
    "get_field",
    "has_field",
    "DocumentStoreError",
    "UnknownCollection",
    "DuplicateKey",
    "DocumentNotFound",
    "SortFieldUnresolvable",
    "InvalidOrderBy",
    "AnyFilter",
    "EqFilter",
    "ExistsFilter",
    "AnyOfFilter",
    "InArrayFilter",
    "GtFilter",
    "GteFilter",
    "LtFilter",
    "LteFilter",
    "LikeFilter",
    "AndFilter",
    "OrFilter",
    "NotFilter",
    "DocIdFilter",
    "AnyOfDocIdFilter",
    "Index",
    "IndexField",
    "FieldIndex",
    "MultiFieldIndex",
    "Sort",
    "Asc",
    "Desc",
    "AndOrder",
    "OrderBy",
]

"""
InMemoryConnection - the process-local state behind a DocumentStore.
"""

from dataclasses import dataclass, field
from typing import Any


def index_key(index: Any) -> str:
    """
    Name under which an index declaration is recorded.

    Declarations are opaque: anything without an ``index_name`` is keyed by
    its repr.
    """
    if isinstance(index, str):
        return index
    return getattr(index, "index_name", None) or repr(index)


@dataclass
class InMemoryConnection:
    """
    Holds every collection and its index metadata.

    Attributes:
        documents: Collection name -> (doc id -> document), insertion ordered.
        indices: Collection name -> (index key -> declaration). Metadata only.
    """

    documents: dict[str, dict[str, dict[str, Any]]] = field(default_factory=dict)
    indices: dict[str, dict[str, Any]] = field(default_factory=dict)

    def collection(self, name: str) -> dict[str, dict[str, Any]] | None:
        return self.documents.get(name)

    def create_collection(self, name: str, indices: tuple[Any, ...] = ()) -> None:
        declared = {index_key(index): index for index in indices}
        self.documents[name] = {}
        self.indices[name] = declared

    def remove_collection(self, name: str) -> None:
        self.documents.pop(name, None)
        self.indices.pop(name, None)

    def record_index(self, name: str, index: Any) -> None:
        if name in self.indices:
            self.indices[name][index_key(index)] = index

    def forget_index(self, name: str, index: Any) -> None:
        if name in self.indices:
            self.indices[name].pop(index_key(index), None)

"""
Filter abstract base class for document predicates.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Filter(ABC):
    """
    Predicate evaluated against a single document and its id.

    Implementations must be:
    - Pure: the same document and id always give the same answer
    - Non-mutating: the document is read, never modified
    """

    @abstractmethod
    def match(self, doc: Mapping[str, Any], doc_id: str) -> bool:
        """
        Decide whether a document is included in a result.

        Args:
            doc: The stored document.
            doc_id: The id the document is stored under.

        Returns:
            True if the document matches, False otherwise.
        """
        pass

    def __and__(self, other: "Filter") -> "Filter":
        from docstore.models.filters import AndFilter

        return AndFilter(self, other)

    def __or__(self, other: "Filter") -> "Filter":
        from docstore.models.filters import OrFilter

        return OrFilter(self, other)

    def __invert__(self) -> "Filter":
        from docstore.models.filters import NotFilter

        return NotFilter(self)

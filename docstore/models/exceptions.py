"""
Custom exceptions for the document store.
"""

from typing import Any


class DocumentStoreError(RuntimeError):
    """Base class for every error raised by the document store."""


class UnknownCollection(DocumentStoreError):
    """
    Raised when an operation addresses a collection that does not exist.

    Collections are never created implicitly.
    """

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Collection {collection!r} does not exist")


class DuplicateKey(DocumentStoreError):
    """Raised by add_doc when the id is already taken in the collection."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(
            f"Cannot add doc with id {doc_id!r}. "
            f"The doc already exists in collection {collection!r}"
        )


class DocumentNotFound(DocumentStoreError):
    """Raised by update_doc when the id does not exist in the collection."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(
            f"Doc with id {doc_id!r} does not exist in collection {collection!r}"
        )


class SortFieldUnresolvable(DocumentStoreError):
    """
    Raised while sorting when a document cannot provide a usable sort value.

    This is a hard stop: returning a partially ordered result would be unsound.
    """

    def __init__(self, field: str, doc_id: str | None = None, reason: str | None = None):
        """
        Initialize sort error.

        Args:
            field: Dotted path of the sort field.
            doc_id: Id of the offending document, when known.
            reason: Optional detail appended to the message.
        """
        self.field = field
        self.doc_id = doc_id
        self.reason = reason

        message = f"Unable to resolve sort field {field!r}"
        if doc_id is not None:
            message += f" on doc {doc_id!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidOrderBy(DocumentStoreError):
    """Raised when an OrderBy node is neither Asc, Desc nor AndOrder."""

    def __init__(self, order_by: Any):
        self.order_by = order_by
        super().__init__(
            f"Unsupported OrderBy node of type {type(order_by).__name__}: {order_by!r}"
        )

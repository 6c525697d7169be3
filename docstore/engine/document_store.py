"""
DocumentStore - Main document store API.
"""

import logging
from collections.abc import Mapping
from typing import Any

from docstore.engine.query import Entry, QueryResult, run_query
from docstore.interfaces.filter import Filter
from docstore.models.connection import InMemoryConnection
from docstore.models.document import clone, ensure_document, shallow_merge
from docstore.models.exceptions import DocumentNotFound, DuplicateKey, UnknownCollection
from docstore.models.index import Index
from docstore.models.order_by import OrderBy
from docstore.settings import StoreSettings

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    In-memory, collection oriented document store.

    Provides:
    - Collection lifecycle: add_collection, drop_collection, listing
    - CRUD: add_doc, update_doc, upsert_doc, delete_doc, get_doc
    - Batch writes: update_many, delete_many (not atomic)
    - Queries: filter_docs / filter_doc_ids (filter -> sort -> paginate)

    Index declarations are accepted and recorded but never used.
    Access is single-threaded: callers must serialize concurrent writers.
    """

    def __init__(
        self,
        connection: InMemoryConnection | None = None,
        settings: StoreSettings | None = None,
    ) -> None:
        """
        Initialize the document store.

        Args:
            connection: Backing state. A fresh, empty one is created if omitted.
            settings: Store settings. Defaults are used if omitted.
        """
        self._connection = connection if connection is not None else InMemoryConnection()
        self._settings = settings or StoreSettings()

    @property
    def connection(self) -> InMemoryConnection:
        return self._connection

    # --- collections ------------------------------------------------------

    def list_collections(self) -> list[str]:
        return list(self._connection.documents)

    def filter_collections_by_prefix(self, prefix: str) -> list[str]:
        return [name for name in self._connection.documents if name.startswith(prefix)]

    def has_collection(self, collection: str) -> bool:
        return collection in self._connection.documents

    def add_collection(self, collection: str, *indices: Index) -> None:
        """
        Create an empty collection.

        Re-adding an existing collection replaces it, discarding its
        documents. Check has_collection first if that is not wanted.

        Args:
            collection: Collection name.
            *indices: Index declarations, stored as metadata only.
        """
        if self.has_collection(collection):
            logger.warning(
                f"Collection {collection!r} re-created, "
                f"{len(self._connection.documents[collection])} docs discarded"
            )
        self._connection.create_collection(collection, indices)
        logger.debug(f"Collection {collection!r} created with {len(indices)} index(es)")

    def drop_collection(self, collection: str) -> None:
        """Remove a collection and its documents. No-op if it does not exist."""
        if self.has_collection(collection):
            self._connection.remove_collection(collection)
            logger.debug(f"Collection {collection!r} dropped")

    def has_collection_index(self, collection: str, index_name: str) -> bool:
        # Indices are never materialized
        return False

    def add_collection_index(self, collection: str, index: Index) -> None:
        self._connection.record_index(collection, index)

    def drop_collection_index(self, collection: str, index: Index | str) -> None:
        self._connection.forget_index(collection, index)

    # --- documents --------------------------------------------------------

    def add_doc(self, collection: str, doc_id: str, doc: Mapping[str, Any]) -> None:
        """
        Insert a new document.

        Raises:
            UnknownCollection: If the collection does not exist.
            DuplicateKey: If ``doc_id`` is already in the collection.
            TypeError: If ``doc`` is not a mapping.
        """
        self._assert_has_collection(collection)
        ensure_document(doc)

        if self._has_doc(collection, doc_id):
            raise DuplicateKey(collection, doc_id)

        self._docs(collection)[doc_id] = self._stored(doc)

    def update_doc(self, collection: str, doc_id: str, doc_or_subset: Mapping[str, Any]) -> None:
        """
        Shallow-merge ``doc_or_subset`` into an existing document.

        Top-level keys of ``doc_or_subset`` replace (or add) the stored keys;
        every other stored key is kept. Nested values are replaced, not merged.

        Raises:
            UnknownCollection: If the collection does not exist.
            DocumentNotFound: If ``doc_id`` is not in the collection.
            TypeError: If ``doc_or_subset`` is not a mapping.
        """
        self._assert_doc_exists(collection, doc_id)
        ensure_document(doc_or_subset)

        docs = self._docs(collection)
        docs[doc_id] = shallow_merge(docs[doc_id], self._stored(doc_or_subset))

    def upsert_doc(self, collection: str, doc_id: str, doc_or_subset: Mapping[str, Any]) -> None:
        """Same as update_doc, except the doc is added if it does not exist."""
        if self._has_doc(collection, doc_id):
            self.update_doc(collection, doc_id, doc_or_subset)
        else:
            self.add_doc(collection, doc_id, doc_or_subset)

    def update_many(self, collection: str, filter: Filter, partial: Mapping[str, Any]) -> None:
        """
        Shallow-merge ``partial`` into every document matching ``filter``.

        Matches are computed before the first write. Not atomic: if one update
        fails, documents updated before it stay updated.
        """
        doc_ids = [doc_id for doc_id, _ in self._query(collection, filter)]

        for doc_id in doc_ids:
            self.update_doc(collection, doc_id, partial)

        logger.debug(f"Updated {len(doc_ids)} docs in collection {collection!r}")

    def delete_doc(self, collection: str, doc_id: str) -> None:
        """Remove a document. No-op if it (or its collection) does not exist."""
        if self._has_doc(collection, doc_id):
            del self._docs(collection)[doc_id]

    def delete_many(self, collection: str, filter: Filter) -> None:
        """
        Remove every document matching ``filter``. Not atomic.

        Raises:
            UnknownCollection: If the collection does not exist.
        """
        doc_ids = [doc_id for doc_id, _ in self._query(collection, filter)]

        for doc_id in doc_ids:
            self.delete_doc(collection, doc_id)

        logger.debug(f"Deleted {len(doc_ids)} docs from collection {collection!r}")

    def get_doc(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """
        Fetch a document by id.

        Returns:
            The document, or None if the collection or id does not exist.
        """
        docs = self._connection.collection(collection)
        if docs is None or doc_id not in docs:
            return None
        return self._returned(docs[doc_id])

    # --- queries ----------------------------------------------------------

    def filter_docs(
        self,
        collection: str,
        filter: Filter,
        skip: int | None = None,
        limit: int | None = None,
        order_by: OrderBy | None = None,
    ) -> QueryResult[dict[str, Any]]:
        """
        Query documents.

        Args:
            collection: Collection to scan.
            filter: Inclusion predicate.
            skip: Number of leading results to drop.
            limit: Maximum number of results.
            order_by: Optional ordering; ties keep insertion order.

        Returns:
            Forward-only iterator over matching documents.

        Raises:
            UnknownCollection: If the collection does not exist.
            SortFieldUnresolvable: If a compared doc lacks a sort field.
            InvalidOrderBy: If ``order_by`` has an unknown node.
        """
        entries = self._query(collection, filter, skip, limit, order_by)
        return QueryResult(entries, lambda entry: self._returned(entry[1]))

    def filter_doc_ids(
        self,
        collection: str,
        filter: Filter,
        skip: int | None = None,
        limit: int | None = None,
        order_by: OrderBy | None = None,
    ) -> QueryResult[str]:
        """Same as filter_docs, but yields document ids."""
        entries = self._query(collection, filter, skip, limit, order_by)
        return QueryResult(entries, lambda entry: entry[0])

    def _query(
        self,
        collection: str,
        filter: Filter,
        skip: int | None = None,
        limit: int | None = None,
        order_by: OrderBy | None = None,
    ) -> list[Entry]:
        self._assert_has_collection(collection)
        return run_query(self._docs(collection).items(), filter, skip, limit, order_by)

    # --- helpers ----------------------------------------------------------

    def _docs(self, collection: str) -> dict[str, dict[str, Any]]:
        return self._connection.documents[collection]

    def _has_doc(self, collection: str, doc_id: str) -> bool:
        docs = self._connection.collection(collection)
        return docs is not None and doc_id in docs

    def _assert_has_collection(self, collection: str) -> None:
        if not self.has_collection(collection):
            raise UnknownCollection(collection)

    def _assert_doc_exists(self, collection: str, doc_id: str) -> None:
        self._assert_has_collection(collection)

        if not self._has_doc(collection, doc_id):
            raise DocumentNotFound(collection, doc_id)

    def _stored(self, doc: Mapping[str, Any]) -> dict[str, Any]:
        return clone(doc) if self._settings.copy_documents else dict(doc)

    def _returned(self, doc: Mapping[str, Any]) -> dict[str, Any]:
        return clone(doc) if self._settings.copy_documents else doc

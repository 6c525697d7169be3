"""
In-memory document store.

This package provides a collection oriented document store with:
- add_doc / update_doc / upsert_doc / delete_doc / get_doc - O(1) by id
- update_many / delete_many - filter driven batch writes
- filter_docs(filter, skip, limit, order_by) - scan, stable sort, paginate
- Composable filters and multi-key, case-insensitive ordering
"""

from docstore.engine.document_store import DocumentStore
from docstore.models.connection import InMemoryConnection
from docstore.settings import StoreSettings, configure_logging

__all__ = ["DocumentStore", "InMemoryConnection", "StoreSettings", "configure_logging"]

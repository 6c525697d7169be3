"""
Shared pytest fixtures for document store tests.
"""

import pytest

from docstore.engine.document_store import DocumentStore
from docstore.models.connection import InMemoryConnection


@pytest.fixture
def connection():
    """Provide an empty in-memory connection."""
    return InMemoryConnection()


@pytest.fixture
def store(connection):
    """Provide a DocumentStore over a fresh connection."""
    return DocumentStore(connection)


@pytest.fixture
def users_store(store):
    """Provide a store with a small 'users' collection."""
    store.add_collection("users")
    store.add_doc("users", "1", {"name": "Bob", "age": 30, "address": {"city": "Berlin"}})
    store.add_doc("users", "2", {"name": "alice", "age": 25, "address": {"city": "Munich"}})
    store.add_doc("users", "3", {"name": "Carol", "age": 35, "tags": ["admin", "ops"]})
    return store


@pytest.fixture
def sample_docs():
    """Provide (doc_id, doc) pairs with repeated sort keys for ordering tests."""
    return [
        ("a", {"group": 2, "rank": 1, "name": "delta"}),
        ("b", {"group": 1, "rank": 5, "name": "Alpha"}),
        ("c", {"group": 2, "rank": 3, "name": "charlie"}),
        ("d", {"group": 1, "rank": 5, "name": "bravo"}),
        ("e", {"group": 1, "rank": 2, "name": "Echo"}),
    ]

"""
Document store engine: CRUD, ordering and the query pipeline.
"""

from docstore.engine.comparator import DocumentComparator, compare_docs, compare_values
from docstore.engine.document_store import DocumentStore
from docstore.engine.query import QueryResult, run_query

__all__ = [
    "DocumentStore",
    "DocumentComparator",
    "compare_docs",
    "compare_values",
    "QueryResult",
    "run_query",
]

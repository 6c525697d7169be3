"""
Abstract base classes for the document store.
"""

from docstore.interfaces.filter import Filter

__all__ = ["Filter"]

"""
Ludex catalog package.

Layered the same way as the rest of the application:

  catalog/storage.py       — whole-document backends (JSON file, in-memory).
  catalog/repositories/    — pure I/O: load and persist documents, fail-open
                             reads and fail-closed writes.
  catalog/services/        — business logic: ids, membership, ordering.
  catalog/categories.py    — path-first helpers for callers holding a file path.

``ludex.py`` is the command-line integration point.
"""
from .exceptions import CatalogError, CategoryNotFoundError
from .ids import generate_id, is_valid_id

__all__ = [
    'CatalogError',
    'CategoryNotFoundError',
    'generate_id',
    'is_valid_id',
]

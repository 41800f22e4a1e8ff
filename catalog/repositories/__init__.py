"""Repository package — expose all concrete repositories from one import."""
from .base import BaseRepository
from .category_repository import CategoryRepository

__all__ = [
    'BaseRepository',
    'CategoryRepository',
]

"""Services package — expose all concrete services from one import."""
from .category_service import CategoryService

__all__ = [
    'CategoryService',
]

"""Exceptions raised by the catalog package."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class CategoryNotFoundError(CatalogError, LookupError):
    """No category in the document has the requested id."""

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Category {category_id} not found")
        self.category_id = category_id

"""Repository for the category document ([{id, name, games}, ...])."""
from typing import Dict, List, Optional
from .base import BaseRepository


class CategoryRepository(BaseRepository):
    """Persists the ordered category list as a single JSON document.

    Schema::

        [
          {"id": "<nine digits>", "name": "<label>", "games": ["<game_id>", ...]}
        ]

    The list order is the user-visible category order and is written back
    verbatim.  Nothing is cached: callers :meth:`load`, transform the
    returned list, and :meth:`save` it.
    """

    def load(self) -> List[Dict]:
        """Return the document, or ``[]`` if it is missing or corrupt."""
        data = self._load([])
        if not isinstance(data, list):
            self._log.error("Ignoring %s: top level is %s, not a list",
                            self.location, type(data).__name__)
            return []
        return data

    def save(self, data: List[Dict]) -> None:
        """Overwrite the document with *data*.  Write errors propagate."""
        self._save(data)
        self._log.info("Category data successfully updated")

    @staticmethod
    def matches(category, category_id: str) -> bool:
        """``True`` if *category* is a category object with *category_id*.

        Entries that aren't JSON objects never match; they are left in place
        rather than discarding the rest of the document.
        """
        return isinstance(category, dict) and category.get('id') == category_id

    @classmethod
    def find(cls, data: List[Dict], category_id: str) -> Optional[Dict]:
        """Return the first category in *data* with *category_id*, or ``None``."""
        for category in data:
            if cls.matches(category, category_id):
                return category
        return None

    @classmethod
    def index_of(cls, data: List[Dict], category_id: str) -> int:
        for i, category in enumerate(data):
            if cls.matches(category, category_id):
                return i
        return -1

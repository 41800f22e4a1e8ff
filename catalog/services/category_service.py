"""Business logic for user-defined game categories."""
import logging
from typing import Dict, List, Optional

from ..exceptions import CategoryNotFoundError
from ..ids import generate_id
from ..repositories.category_repository import CategoryRepository


class CategoryService:
    """Creates, renames, reorders, and fills categories, delegating
    persistence to :class:`~catalog.repositories.category_repository.CategoryRepository`.

    Every public method loads the whole document, changes it in memory and
    (when something changed) writes the whole document back.  There is no
    cache and no locking: two overlapping calls on the same file race and
    the later write wins, so callers must finish one call before issuing
    the next.

    Rules
    -----
    * Ids come from :func:`~catalog.ids.generate_id`; equal names give equal
      ids and no uniqueness check is made.
    * A category id that is not in the document is reported with a warning
      and ``False``; nothing is written.  Use :meth:`require` to turn that
      into :class:`~catalog.exceptions.CategoryNotFoundError`.
    * Adding a game that is already a member is a no-op (returns ``False``).
    * Reordering is an adjacent swap; moving the first item up or the last
      item down is a no-op.
    * No sorting is ever applied.
    """

    def __init__(self, repository: CategoryRepository,
                 logger: Optional[logging.Logger] = None) -> None:
        self._repo = repository
        self._log = logger or logging.getLogger('ludex.service.categories')

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lookup(self, data: List[Dict], category_id: str) -> Optional[Dict]:
        category = self._repo.find(data, category_id)
        if category is None:
            self._log.warning("Category %s not found", category_id)
        return category

    @staticmethod
    def _swap(items: List, i: int, j: int) -> None:
        items[i], items[j] = items[j], items[i]

    def _move_category(self, category_id: str, step: int) -> bool:
        data = self._repo.load()
        index = self._repo.index_of(data, category_id)
        if index < 0:
            self._log.warning("Category %s not found", category_id)
            return False
        target = index + step
        if target < 0 or target >= len(data):
            self._log.info("Category %s is already at the %s", category_id,
                           'top' if step < 0 else 'bottom')
            return False
        self._swap(data, index, target)
        self._repo.save(data)
        return True

    def _move_game(self, category_id: str, game_id: str, step: int) -> bool:
        data = self._repo.load()
        category = self._lookup(data, category_id)
        if category is None:
            return False
        games = category.setdefault('games', [])
        if game_id not in games:
            self._log.warning("Game %s is not in category %s", game_id, category_id)
            return False
        index = games.index(game_id)
        target = index + step
        if target < 0 or target >= len(games):
            self._log.info("Game %s is already at the %s of category %s", game_id,
                           'top' if step < 0 else 'bottom', category_id)
            return False
        self._swap(games, index, target)
        self._repo.save(data)
        return True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_all(self) -> List[Dict]:
        """Return the full document (``[]`` if it is missing or corrupt)."""
        return self._repo.load()

    def replace_all(self, data: List[Dict]) -> None:
        """Overwrite the document with *data*.  Write errors propagate."""
        self._repo.save(data)

    def get(self, category_id: str) -> Optional[Dict]:
        """Return the category with *category_id*, or ``None``."""
        return self._repo.find(self._repo.load(), category_id)

    def require(self, category_id: str) -> Dict:
        """Return the category with *category_id*.

        Raises:
            CategoryNotFoundError: No category has that id.
        """
        category = self.get(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    def create(self, name: str) -> Dict:
        """Append a new empty category called *name* and return it."""
        data = self._repo.load()
        category = {'id': generate_id(name), 'name': name, 'games': []}
        data.append(category)
        self._repo.save(data)
        return category

    def delete(self, category_id: str) -> bool:
        """Remove the category with *category_id*.

        The document is written back even if nothing matched.

        Returns:
            ``True`` if a category was removed.
        """
        data = self._repo.load()
        remaining = [c for c in data if not self._repo.matches(c, category_id)]
        self._repo.save(remaining)
        return len(remaining) != len(data)

    def rename(self, category_id: str, new_name: str) -> bool:
        """Set the display name of *category_id*.  The id is unchanged."""
        data = self._repo.load()
        category = self._lookup(data, category_id)
        if category is None:
            return False
        category['name'] = new_name
        self._repo.save(data)
        return True

    def add_game(self, category_id: str, game_id: str) -> bool:
        """Append *game_id* to *category_id*.

        Returns:
            ``True`` if added; ``False`` if already a member or the category
            doesn't exist.
        """
        data = self._repo.load()
        category = self._lookup(data, category_id)
        if category is None:
            return False
        games = category.setdefault('games', [])
        if game_id in games:
            self._log.warning("Game %s is already in category %s", game_id, category_id)
            return False
        games.append(game_id)
        self._repo.save(data)
        return True

    def remove_game(self, category_id: str, game_id: str) -> bool:
        """Drop every occurrence of *game_id* from *category_id*.

        Written back whenever the category exists, member or not.

        Returns:
            ``False`` only if the category doesn't exist.
        """
        data = self._repo.load()
        category = self._lookup(data, category_id)
        if category is None:
            return False
        category['games'] = [g for g in category.get('games', []) if g != game_id]
        self._repo.save(data)
        return True

    def remove_game_everywhere(self, game_id: str) -> int:
        """Drop *game_id* from every category, e.g. after it leaves the library.

        Returns:
            Number of categories that referenced the game.
        """
        data = self._repo.load()
        touched = 0
        for category in data:
            if not isinstance(category, dict):
                continue
            games = category.get('games', [])
            kept = [g for g in games if g != game_id]
            if len(kept) != len(games):
                touched += 1
            category['games'] = kept
        self._repo.save(data)
        return touched

    def move_up(self, category_id: str) -> bool:
        """Swap *category_id* with the category before it."""
        return self._move_category(category_id, -1)

    def move_down(self, category_id: str) -> bool:
        """Swap *category_id* with the category after it."""
        return self._move_category(category_id, 1)

    def move_game_up(self, category_id: str, game_id: str) -> bool:
        """Swap *game_id* with the game before it in *category_id*."""
        return self._move_game(category_id, game_id, -1)

    def move_game_down(self, category_id: str, game_id: str) -> bool:
        """Swap *game_id* with the game after it in *category_id*."""
        return self._move_game(category_id, game_id, 1)

    def categories_for_game(self, game_id: str) -> List[Dict]:
        """Return every category that lists *game_id*, in document order."""
        return [c for c in self._repo.load()
                if isinstance(c, dict) and game_id in c.get('games', [])]

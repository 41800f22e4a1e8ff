"""Repository base class used by all concrete repositories."""
import logging
from typing import Any, Optional


class BaseRepository:
    """Provides whole-document persistence through a storage backend.

    Unlike a caching repository, nothing is held between calls: every
    :meth:`_load` goes back to the backend, and every :meth:`_save`
    rewrites the full document.  The backend is the sole source of truth.

    Reads are fail-open (a missing, corrupt or too deeply nested document
    yields *default*); writes are fail-closed (errors are logged and
    re-raised).
    """

    def __init__(self, storage, logger: Optional[logging.Logger] = None) -> None:
        self._storage = storage
        self._log = logger or logging.getLogger(f'ludex.repository.{type(self).__name__}')

    @property
    def location(self) -> str:
        return self._storage.location

    def _load(self, default: Any) -> Any:
        """Read the document, returning *default* on missing/corrupt data."""
        try:
            return self._storage.read()
        except (OSError, ValueError, RecursionError) as exc:
            self._log.error("Could not load %s: %s", self.location, exc)
        return default

    def _save(self, data: Any) -> None:
        """Write *data* through the backend, re-raising any failure."""
        try:
            self._storage.write(data)
        except Exception as exc:
            self._log.error("Could not write %s: %s", self.location, exc)
            raise

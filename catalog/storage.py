"""Storage backends for whole-document JSON persistence.

A backend reads and writes one JSON document as a unit.  Repositories never
touch the filesystem directly; they go through a backend so tests can swap
in :class:`MemoryStorage`.
"""
import json
import os
import tempfile
from typing import Any, Optional


def dumps(document: Any) -> str:
    """Serialise *document* the way every backend stores it on disk."""
    return json.dumps(document, indent=2, ensure_ascii=False)


class JsonFileStorage:
    """Stores a JSON document in a UTF-8 file at *path*.

    Writes go to a sibling temp file which is then renamed over the target,
    so the file is never left in a partially-written state.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    @property
    def location(self) -> str:
        return self.path

    def read(self) -> Any:
        """Parse and return the file contents.

        Raises:
            OSError: The file is missing or unreadable.
            ValueError: The file is not valid JSON.
        """
        with open(self.path, 'r', encoding='utf-8') as fh:
            return json.load(fh)

    def write(self, document: Any) -> None:
        """Replace the file with *document*.

        Serialisation happens before the temp file is created so an
        unserialisable document leaves nothing behind.
        """
        text = dumps(document)
        dir_name = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                fh.write(text)
            os.replace(tmp_path, self.path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise


class MemoryStorage:
    """In-memory backend holding the serialised text of one document.

    Each :meth:`read` parses the stored text again, so callers get a fresh
    copy just as they would from a file.  ``raw`` is ``None`` until the
    first write (or when constructed without a document), which reads as a
    missing file.
    """

    def __init__(self, document: Any = None, raw: Optional[str] = None) -> None:
        self.raw: Optional[str] = raw
        if document is not None:
            self.raw = dumps(document)
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    @property
    def location(self) -> str:
        return '<memory>'

    def read(self) -> Any:
        if self.fail_reads:
            raise OSError('simulated read failure')
        if self.raw is None:
            raise FileNotFoundError('no document stored')
        return json.loads(self.raw)

    def write(self, document: Any) -> None:
        if self.fail_writes:
            raise OSError('simulated write failure')
        self.raw = dumps(document)
        self.writes += 1

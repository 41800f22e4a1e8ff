"""Deterministic identifiers derived from display names.

Categories and games share the same scheme: a pure function of the name,
so re-adding a name always yields the same id.
"""
import hashlib
import re

_ID_RE = re.compile(r'^[1-9][0-9]{8}$')


def generate_id(name: str) -> str:
    """Return the nine-digit id for *name*.

    The first 8 hex digits of the MD5 digest are reduced modulo 900,000,000
    and offset by 100,000,000, so the result never starts with ``0``.

    Example::

        >>> len(generate_id('RPG'))
        9
    """
    digest = hashlib.md5(name.encode('utf-8')).hexdigest()
    number = int(digest[:8], 16)
    return str(number % 900000000 + 100000000)


def is_valid_id(value) -> bool:
    """Check that *value* is a nine-digit string not starting with zero."""
    return isinstance(value, str) and bool(_ID_RE.match(value))

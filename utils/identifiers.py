"""
utils/identifiers.py
--------------------
Primary-key generation. Identifiers are ULIDs: a 48-bit millisecond
timestamp followed by 80 random bits, so they sort by creation time both
as integers and as their 26-character text form.
"""

import threading
from typing import Optional

from ulid import ULID

from errors import MalformedIdentifierError


class IdentifierGenerator:
    """
    Thread-safe, monotonic ULID source.

    Values issued by one generator strictly increase, even when several
    are drawn within the same millisecond or the wall clock steps back.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last: Optional[int] = None

    def generate(self) -> ULID:
        candidate = int(ULID())
        with self._lock:
            if self._last is not None and candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
        return ULID.from_int(candidate)


_default = IdentifierGenerator()


def default_generator() -> IdentifierGenerator:
    """The process-wide generator shared by repositories and `new_id`."""
    return _default


def new_id() -> ULID:
    """Return a fresh identifier from the process-wide generator."""
    return _default.generate()


def parse_id(value) -> ULID:
    """
    Parse a stored identifier.

    Raises:
        MalformedIdentifierError: If ``value`` is not a valid ULID string.
    """
    if isinstance(value, ULID):
        return value
    if not isinstance(value, str):
        raise MalformedIdentifierError(value)
    try:
        return ULID.from_str(value)
    except ValueError:
        raise MalformedIdentifierError(value) from None

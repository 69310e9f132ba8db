"""
Conversion between external identifier strings and ``uuid.UUID`` keys.

Only the canonical text form is accepted: 36 characters, lowercase hex
digits in ``8-4-4-4-12`` groups.  That is exactly what ``str(UUID)``
produces, so ``format_id(parse_id(s)) == s`` holds for every accepted
string.
"""

import re
import uuid
from typing import Any

from .errors import InvalidIdentifierError

CANONICAL_LENGTH = 36

_CANONICAL_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


def parse_id(raw: Any) -> uuid.UUID:
    """Parse ``raw`` into a key or raise :class:`InvalidIdentifierError`."""
    if not isinstance(raw, str):
        raise InvalidIdentifierError(raw, "not a string")
    if len(raw) != CANONICAL_LENGTH:
        raise InvalidIdentifierError(raw, "incorrect length")
    if not _CANONICAL_RE.match(raw):
        raise InvalidIdentifierError(raw, "invalid format")
    return uuid.UUID(raw)


def format_id(key: uuid.UUID) -> str:
    return str(key)


def new_id() -> uuid.UUID:
    """Default identifier generator used by repositories on insert."""
    return uuid.uuid4()

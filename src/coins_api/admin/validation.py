"""Coercion of loosely-typed JSON values from admin request bodies."""

from __future__ import annotations

import re
from typing import Any

from coins_api.db.models import MAX_COINS

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_int(value: Any) -> int | None:  # noqa: ANN401
    """
    Interpret a JSON value as an integer.

    Accepts ints, integral floats and strings holding an optionally signed
    decimal integer, as long as the magnitude fits in ``MAX_COINS``. Returns
    None for anything else (bools included).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        parsed = int(value)
    elif isinstance(value, str) and _INT_RE.match(value):
        parsed = int(value)
    else:
        return None
    return parsed if abs(parsed) <= MAX_COINS else None

def parse_non_negative_int(value: Any) -> int | None:  # noqa: ANN401
    """Like ``parse_int`` but also rejects negative values."""
    parsed = parse_int(value)
    if parsed is None or parsed < 0:
        return None
    return parsed

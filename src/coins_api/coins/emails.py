"""Email normalization and shape checks."""

from __future__ import annotations

import re
from typing import Any

from coins_api.errors import ClientInputError

# local@domain.tld: one "@", a dot in the domain part, no whitespace
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_email(email: str) -> str:
    """Trim whitespace and lower-case. Idempotent."""
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    """Check the basic ``local@domain.tld`` shape."""
    return _EMAIL_RE.match(email) is not None


def require_email(value: Any) -> str:  # noqa: ANN401
    """
    Return the normalized email from a raw request value.

    Raises:
        ClientInputError: If the value is missing, not a string, or blank.
    """
    if not isinstance(value, str) or not value.strip():
        msg = "Email is required"
        raise ClientInputError(msg)
    return normalize_email(value)

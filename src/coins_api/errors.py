"""Error taxonomy shared by every handler.

Each error carries the HTTP status it maps to and a client-safe message.
``middleware.error_handler`` renders them as ``{"error": message}``.
"""

from __future__ import annotations


class CoinsAPIError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientInputError(CoinsAPIError):
    """Invalid or missing request input."""

    status_code = 400


class AuthError(CoinsAPIError):
    """Authentication failed. Messages are deliberately generic."""

    status_code = 401


class NotFoundError(CoinsAPIError):
    """The addressed record does not exist."""

    status_code = 404


class ConflictError(CoinsAPIError):
    """A uniqueness constraint would be violated."""

    status_code = 409


class ServerConfigError(CoinsAPIError):
    """A required secret or setting is missing on the server."""

    status_code = 500


SERVER_CONFIG_MESSAGE = "Server configuration error"

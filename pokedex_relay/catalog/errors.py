"""
Error types used by the catalogue.

Two families live here.  ``UpstreamStatusError`` and
``UpstreamUnavailableError`` are raised by the PokéAPI client and
describe what happened on the wire.  The ``RelayError`` subclasses are
what the routes raise; each carries the HTTP status and the
``{message, error}`` pair sent back to the client.  The handler
registered in ``main.create_app`` renders them.
"""

from typing import Any, Optional


class UpstreamStatusError(Exception):
    """The upstream service replied with a non-success status.

    ``payload`` is the decoded JSON error body when the server sent one.
    """

    def __init__(self, status_code: int, url: str, payload: Any = None) -> None:
        super().__init__(f"{url} returned status {status_code}")
        self.status_code = status_code
        self.url = url
        self.payload = payload


class UpstreamUnavailableError(Exception):
    """No reply was received from the upstream service."""

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        super().__init__(f"no response from {url}: {reason or 'unknown reason'}")
        self.url = url
        self.reason = reason


class RelayError(Exception):
    status_code = 500
    message = "Internal server error"
    error = "An unexpected error occurred"

    def __init__(self, error: Optional[str] = None) -> None:
        if error is not None:
            self.error = error
        super().__init__(f"{self.message}: {self.error}")


class InvalidInputError(RelayError):
    status_code = 400
    message = "Invalid pokemon name"
    error = "Pokemon name must contain only letters, numbers, and hyphens"


class NotFoundError(RelayError):
    status_code = 404
    message = "Pokemon not found"

    def __init__(self, name: str) -> None:
        super().__init__(f"No pokemon found with name: {name}")


class UpstreamError(RelayError):
    status_code = 502
    message = "External service unavailable"
    error = "Unable to fetch pokemon data from external API"


class TransportError(RelayError):
    status_code = 503
    message = "Network error"
    error = "Unable to connect to pokemon service"


class InternalError(RelayError):
    """Anything else, e.g. a payload that does not match the schema."""

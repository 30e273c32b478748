"""Exception hierarchy for the CRPT client.

Every error surfaced by ``CrptApi.submit()`` derives from ``CrptError`` so callers
can catch the whole family in one place.
"""


class CrptError(Exception):
    """Base class for all client errors."""


class ValidationError(CrptError, ValueError):
    """A document or product violates a field constraint."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class EncodingError(CrptError):
    """A validated document could not be serialized."""


class ApiError(CrptError):
    """The API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API request failed ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ProtocolError(CrptError):
    """The API answered 200 but the body has an unexpected shape."""


class TransportError(CrptError):
    """The request could not be sent or the response could not be read."""

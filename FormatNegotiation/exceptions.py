"""
Negotiation errors.

Errors are raised by strategies and propagate untouched through the
resolver. The hosting middleware turns them into error responses.
"""

from typing import Any


class NegotiationError(Exception):
    """
    Structured negotiation failure.

    Attributes:
        status_code: HTTP status to report.
        message: Short summary.
        details: Human-readable detail strings, in order.
    """

    status_code: int = 400
    message: str = "Bad request"

    def __init__(
        self,
        message: str | None = None,
        details: list[str] | None = None,
        status_code: int | None = None,
    ) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = tuple(details or ())
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Error body in the GeoServer REST error layout."""
        return {
            "error": {
                "code": self.status_code,
                "message": self.message,
                "details": list(self.details),
            }
        }


class UnsupportedFormatError(NegotiationError):
    """The ``f`` parameter names a format we cannot produce."""

    message = "Output format not supported"

    def __init__(self, format: str) -> None:
        self.format = format
        super().__init__(details=[f"Format {format} is not supported"])


class InvalidMediaTypeError(NegotiationError):
    """A media type string could not be parsed."""

    message = "Invalid media type"

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(details=[f'Invalid media type "{value}": {reason}'])

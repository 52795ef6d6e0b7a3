"""Payload input errors."""

from __future__ import annotations


class PayloadError(Exception):
    """Raised when a payload cannot be turned into an instance to validate."""


class EmptyPayloadError(PayloadError):
    """Raised when the payload text is missing or the empty string."""

    def __init__(self) -> None:
        super().__init__("Payload is empty")


class EmptyDocumentError(PayloadError):
    """Raised when non-empty payload text contains no document."""

    def __init__(self) -> None:
        super().__init__("Payload contains no document")

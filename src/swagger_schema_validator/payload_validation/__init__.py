"""Payload validation exports."""

from .payload_errors import EmptyDocumentError, EmptyPayloadError, PayloadError
from .swagger_validator import Deserializer, SwaggerValidator

__all__ = [
    "Deserializer",
    "EmptyDocumentError",
    "EmptyPayloadError",
    "PayloadError",
    "SwaggerValidator",
]

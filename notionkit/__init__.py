from notionkit.client import Client
from notionkit.errors import (
    ApiError,
    MalformedResponse,
    NotionError,
    TransportError,
    UnsupportedPropertyType,
    UnsupportedSpanType,
)

__all__ = [
    "Client",
    "ApiError",
    "MalformedResponse",
    "NotionError",
    "TransportError",
    "UnsupportedPropertyType",
    "UnsupportedSpanType",
]

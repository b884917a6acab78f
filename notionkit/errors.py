"""Errors raised by notionkit.

Everything derives from `NotionError`, so callers can catch the whole family
with a single `except` clause.
"""


class NotionError(Exception):
    pass


class TransportError(NotionError):
    """Network or connection failure while talking to the API."""


class ApiError(NotionError):
    """Non-200 response from the API.

    Attributes:
        status_code (int): HTTP status of the response.
        code (str): Machine-readable error code from the body,
            i.e. `"object_not_found"`.
        message (str): Human-readable message from the body.
    """

    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message


class MalformedResponse(NotionError):
    """200 response whose body doesn't have the expected shape."""


class UnsupportedPropertyType(NotionError):
    def __init__(self, discriminator: str):
        super().__init__(f"Unsupported property type: {discriminator}")
        self.discriminator = discriminator


class UnsupportedSpanType(NotionError):
    def __init__(self, span_type: str | None):
        super().__init__(f"Unsupported rich text type: {span_type}")
        self.span_type = span_type

"""Exception hierarchy for jsonblob.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from JsonBlobError for easy catching of any jsonblob-specific error.
"""

from __future__ import annotations


class JsonBlobError(Exception):
    """Base exception for all jsonblob errors."""

    pass


class EncodeError(JsonBlobError):
    """Raised when encoding a value into an envelope fails.

    Examples:
        - Value is not part of the JSON data model (set, bytes, custom object)
        - Non-finite float (nan, inf)
        - Compressor failure
    """

    pass


class DecodeError(JsonBlobError):
    """Raised when decoding an envelope fails.

    Subclasses identify the pipeline stage that rejected the input.
    """

    pass


class MalformedWrapper(DecodeError):
    """Raised when the wrapped payload is not valid base64 text.

    Examples:
        - Character outside the base64 alphabet
        - Invalid or missing padding
        - Non-ASCII input
    """

    pass


class EmptyEnvelope(DecodeError):
    """Raised when the input has no transport identifier byte."""

    pass


class CorruptPayload(DecodeError):
    """Raised when the compressed payload cannot be decompressed.

    Examples:
        - Truncated compressed stream
        - Bad magic number or frame header
        - Trailing bytes after the compressed frame
    """

    pass


class ParseError(DecodeError):
    """Raised when decompressed bytes are not valid serialized JSON.

    Examples:
        - Invalid syntax or truncated document
        - Invalid UTF-8 in text
        - Nesting too deep to parse
    """

    pass


class UnsupportedTransport(EncodeError, DecodeError):
    """Raised when a transport identifier has no registered transport.

    Reserved identifiers always fail; they are never treated as raw or
    uncompressed payloads.

    Attributes:
        transport_id: Raw identifier byte value (0-255)
    """

    def __init__(self, transport_id: int, message: str | None = None) -> None:
        self.transport_id = transport_id
        if message is None:
            message = f"Unsupported transport ID: {transport_id:#04x}"
            if 0x20 < transport_id < 0x7F:
                message += f" ({chr(transport_id)!r})"
        super().__init__(message)

"""Printable text wrapping for compressed payloads.

The wrapper is standard base64 with padding. Unwrapping is strict: any
character outside the alphabet, bad padding, or a length that is not a
multiple of four is rejected.
"""

from __future__ import annotations

import base64
import binascii

from .exceptions import MalformedWrapper

# Copy/paste residue (whitespace, '&', quotes, ...) falls outside this range.
_TRIM_LOW = ord("+")
_TRIM_HIGH = ord("z")


def wrap(data: bytes) -> str:
    """Wrap bytes as printable base64 text.

    Example:
        >>> wrap(b"\\x28\\xb5\\x2f\\xfd")
        'KLUv/Q=='
    """
    return base64.b64encode(data).decode("ascii")


def trim_trailing(data: bytes) -> bytes:
    """Cut data at the first byte outside the '+'..'z' range.

    This tolerates trailing garbage picked up when copying an envelope out of
    a URL or a terminal. It does not sanitize bytes inside that range.

    Example:
        >>> trim_trailing(b"KLUv/Q==&1312")
        b'KLUv/Q=='
    """
    for index, byte in enumerate(data):
        if byte < _TRIM_LOW or byte > _TRIM_HIGH:
            return data[:index]
    return data


def unwrap(text: str | bytes, *, trim: bool = False) -> bytes:
    """Unwrap base64 text back to bytes.

    Args:
        text: Wrapped text (str or ASCII bytes)
        trim: If True, drop everything from the first byte outside '+'..'z'

    Returns:
        Original bytes

    Raises:
        MalformedWrapper: If text is not valid padded base64
    """
    if trim and isinstance(text, str):
        # Non-ASCII code points encode to bytes above 'z' and are cut as well.
        text = text.encode("utf-8", "surrogatepass")

    if isinstance(text, str):
        try:
            text = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise MalformedWrapper(f"Wrapped text contains non-ASCII characters: {e}") from e

    if trim:
        text = trim_trailing(text)

    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise MalformedWrapper(f"Invalid base64 payload: {e}") from e

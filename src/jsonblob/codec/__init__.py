"""Envelope codec for jsonblob.

This module provides encode() and decode(), which combine the serializer,
the transport registry, and the base64 wrapper into the envelope format.
"""

from __future__ import annotations

from .decoder import decode, peek_transport
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "peek_transport",
]

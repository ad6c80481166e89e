"""jsonblob: Compact Text Envelopes for JSON Data

A Python library for packing JSON-like values into a single printable string
suitable for URLs, headers, tokens, and log fields.

Envelope layout:
    <transport char> <base64 of compressed JSON>

The leading character selects the compression scheme. Only '0' (Zstandard)
is assigned today; any other identifier is rejected so that envelopes from
future schemes are never misread by older decoders.

Quick Start:
    >>> from jsonblob import encode, decode
    >>>
    >>> blob = encode({"hello": "world"})
    >>> blob[0]
    '0'
    >>> decode(blob)
    {'hello': 'world'}
"""

from __future__ import annotations

import logging

from .codec import decode, encode, peek_transport
from .config import EnvelopeConfig
from .exceptions import (
    CorruptPayload,
    DecodeError,
    EmptyEnvelope,
    EncodeError,
    JsonBlobError,
    MalformedWrapper,
    ParseError,
    UnsupportedTransport,
)
from .serializer import JsonValue, deserialize, serialize
from .transport import (
    DEFAULT_REGISTRY,
    Transport,
    TransportID,
    TransportRegistry,
    ZstdTransport,
    default_registry,
)
from .wrapper import unwrap, wrap

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "peek_transport",
    "EnvelopeConfig",
    # Stages
    "serialize",
    "deserialize",
    "wrap",
    "unwrap",
    "JsonValue",
    # Transports
    "TransportID",
    "Transport",
    "ZstdTransport",
    "TransportRegistry",
    "DEFAULT_REGISTRY",
    "default_registry",
    # Exceptions
    "JsonBlobError",
    "EncodeError",
    "DecodeError",
    "MalformedWrapper",
    "EmptyEnvelope",
    "UnsupportedTransport",
    "CorruptPayload",
    "ParseError",
    # Version
    "__version__",
]

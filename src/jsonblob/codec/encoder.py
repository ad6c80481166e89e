"""Envelope encoder.

This module provides the encode() function that turns a JSON value into a
printable envelope string:

    envelope := transport_char || base64(compress(serialize(value)))
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import DEFAULT_CONFIG, EnvelopeConfig
from ..serializer import serialize
from ..transport import TransportRegistry
from ..wrapper import wrap

logger = logging.getLogger(__name__)


def encode(
    value: Any,
    *,
    level: Optional[int] = None,
    config: Optional[EnvelopeConfig] = None,
    registry: Optional[TransportRegistry] = None,
) -> str:
    """Encode a JSON value into an envelope string.

    Args:
        value: JSON-compatible value (None, bool, int, float, str, list, dict)
        level: Compression level shortcut; builds a config when none is given
        config: Codec configuration (transport, level)
        registry: Transport registry to use instead of the configured default

    Returns:
        Envelope text; for the '0' transport this is 7-bit printable ASCII

    Raises:
        EncodeError: If value cannot be serialized or compressed
        UnsupportedTransport: If the configured transport is not registered
        ValueError: If both level and config are given

    Examples:
        ```python
        from jsonblob import encode, decode

        blob = encode({"hello": "world"})
        assert blob.startswith("0")
        assert decode(blob) == {"hello": "world"}

        # Faster, larger output
        blob = encode(big_document, level=3)
        ```
    """
    if level is not None:
        if config is not None:
            raise ValueError("Pass either level or config, not both")
        config = EnvelopeConfig(level=level)
    elif config is None:
        config = DEFAULT_CONFIG

    if registry is None:
        registry = config.build_registry()

    data = serialize(value)

    transport_id = config.transport
    compress = registry.compressor_for(transport_id)
    compressed = compress(data)

    envelope = bytes([transport_id]) + compressed
    text = _envelope_to_text(envelope)

    logger.debug(
        "Encoded %d serialized bytes into %d-byte envelope (%d chars, transport %#04x)",
        len(data),
        len(envelope),
        len(text),
        int(transport_id),
    )
    return text


def _envelope_to_text(envelope: bytes) -> str:
    """Render the identifier byte as its character and wrap the rest."""
    return chr(envelope[0]) + wrap(envelope[1:])

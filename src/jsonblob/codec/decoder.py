"""Envelope decoder.

This module provides the decode() function that turns an envelope string
back into a JSON value, and peek_transport() for inspecting the identifier
byte alone.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..config import DEFAULT_CONFIG, EnvelopeConfig
from ..exceptions import EmptyEnvelope, MalformedWrapper
from ..serializer import JsonValue, deserialize
from ..transport import TransportID, TransportRegistry
from ..wrapper import unwrap

logger = logging.getLogger(__name__)

EnvelopeInput = Union[str, bytes, bytearray, memoryview]


def decode(
    text: EnvelopeInput,
    *,
    trim_trailing: Optional[bool] = None,
    config: Optional[EnvelopeConfig] = None,
    registry: Optional[TransportRegistry] = None,
) -> JsonValue:
    """Decode an envelope back into a JSON value.

    The first byte (or, for str input, the first code point) is the transport
    identifier. It is consumed exactly once before anything else is read;
    the remainder is the base64-wrapped compressed payload.

    Args:
        text: Envelope as str or bytes
        trim_trailing: Shortcut for EnvelopeConfig(trim_trailing=...)
        config: Codec configuration
        registry: Transport registry to dispatch on

    Returns:
        Decoded value

    Raises:
        EmptyEnvelope: If text is empty
        MalformedWrapper: If the payload is not valid base64, or a str
            identifier is outside 0-255
        UnsupportedTransport: If the identifier is reserved or unregistered
        CorruptPayload: If decompression fails
        ParseError: If the decompressed bytes are not valid JSON
        ValueError: If both trim_trailing and config are given

    Examples:
        ```python
        from jsonblob import decode

        decode("0KLUv/QBoiQAAeyJoZWxsbyI6IndvcmxkIn0=")
        # {'hello': 'world'}

        # Tolerate residue from copy/paste
        decode("0KLUv/QBoiQAAeyJoZWxsbyI6IndvcmxkIn0=&1312", trim_trailing=True)
        ```
    """
    if trim_trailing is not None:
        if config is not None:
            raise ValueError("Pass either trim_trailing or config, not both")
        config = EnvelopeConfig(trim_trailing=trim_trailing)
    elif config is None:
        config = DEFAULT_CONFIG

    if registry is None:
        registry = config.build_registry()

    transport_id, wrapped = _split_envelope(text)

    compressed = unwrap(wrapped, trim=config.trim_trailing)
    decompress = registry.decompressor_for(transport_id)
    data = decompress(compressed)

    logger.debug(
        "Decoded %d-byte payload into %d serialized bytes (transport %#04x)",
        len(compressed),
        len(data),
        transport_id,
    )
    return deserialize(data)


def peek_transport(
    text: EnvelopeInput, *, registry: Optional[TransportRegistry] = None
) -> TransportID:
    """Return the transport an envelope was encoded with, without decoding it.

    Raises:
        EmptyEnvelope: If text is empty
        MalformedWrapper: If a str identifier is outside 0-255
        UnsupportedTransport: If the identifier is reserved or unregistered

    Example:
        >>> peek_transport("0KLUv/QBoiQAAeyJoZWxsbyI6IndvcmxkIn0=")
        <TransportID.ZSTD: 48>
    """
    if registry is None:
        registry = DEFAULT_CONFIG.build_registry()

    transport_id, _ = _split_envelope(text)
    return registry.get(transport_id).transport_id


def _split_envelope(text: EnvelopeInput) -> tuple[int, Union[str, bytes]]:
    """Split an envelope into its identifier value and wrapped payload.

    Raises:
        EmptyEnvelope: If text is empty
        MalformedWrapper: If a str identifier is outside 0-255
    """
    if not isinstance(text, str):
        text = bytes(text)

    if not text:
        raise EmptyEnvelope("Cannot decode empty envelope: no transport identifier")

    if isinstance(text, str):
        # Inverse of the encoder's chr(byte): one code point in 0-255.
        try:
            head = text[0].encode("latin-1")
        except UnicodeEncodeError:
            raise MalformedWrapper(
                f"Transport identifier {text[0]!r} is not a single byte"
            ) from None
        return head[0], text[1:]
    return text[0], text[1:]

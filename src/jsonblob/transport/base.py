"""Transport identifiers and the abstract transport interface.

A transport is a (compress, decompress) pair selected by the single leading
identifier byte of an envelope. New schemes get a new TransportID member and
a Transport implementation; the envelope framing never changes.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Callable, ClassVar

from ..exceptions import UnsupportedTransport

CompressFn = Callable[[bytes], bytes]
DecompressFn = Callable[[bytes], bytes]


class TransportID(enum.IntEnum):
    """Assigned transport identifier bytes.

    Every byte value without a member here is reserved. Reserved values are
    rejected by from_byte() rather than mapped to a default transport.
    """

    ZSTD = 0x30  # '0'

    @classmethod
    def from_byte(cls, value: int) -> TransportID:
        """Look up the identifier for a raw byte value.

        Raises:
            ValueError: If value is not a byte (0-255)
            UnsupportedTransport: If value is not an assigned identifier
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Transport ID must be a single byte 0-255, got {value}")
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedTransport(value) from None

    @property
    def char(self) -> str:
        """Leading character of envelopes using this transport."""
        return chr(self.value)


class Transport(ABC):
    """Abstract compression scheme bound to a TransportID.

    Implementations must be stateless between calls so a single instance can
    be shared by concurrent encode/decode calls.
    """

    transport_id: ClassVar[TransportID]

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Compress a serialized payload.

        Raises:
            EncodeError: If compression fails
        """

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Decompress a payload produced by compress().

        Raises:
            CorruptPayload: If data is truncated or internally inconsistent
        """

"""Static dispatch from transport identifiers to transports."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from ..exceptions import UnsupportedTransport
from .base import CompressFn, DecompressFn, Transport, TransportID
from .zstd import DEFAULT_LEVEL, ZstdTransport

logger = logging.getLogger(__name__)


class TransportRegistry:
    """Mapping from TransportID to the Transport that handles it.

    Lookups fail closed: an identifier that is not a TransportID member, or a
    member with no registered transport, raises UnsupportedTransport.

    Example:
        >>> registry = TransportRegistry([ZstdTransport()])
        >>> compress = registry.compressor_for(TransportID.ZSTD)
        >>> registry.decompressor_for(TransportID.ZSTD)(compress(b"abc"))
        b'abc'
    """

    def __init__(self, transports: Iterable[Transport] = (), *, frozen: bool = False) -> None:
        self._transports: dict[TransportID, Transport] = {}
        self._frozen = False
        for transport in transports:
            self.register(transport)
        self._frozen = frozen

    def __contains__(self, transport_id: object) -> bool:
        return transport_id in self._transports

    def __len__(self) -> int:
        return len(self._transports)

    def __iter__(self) -> Iterator[Transport]:
        return iter(self._transports.values())

    def __repr__(self) -> str:
        entries = ", ".join(f"{tid.char!r}: {t!r}" for tid, t in self._transports.items())
        return f"{type(self).__name__}({{{entries}}})"

    @property
    def frozen(self) -> bool:
        """True once the registry rejects further registrations."""
        return self._frozen

    def freeze(self) -> TransportRegistry:
        """Reject all later register() calls and return self."""
        self._frozen = True
        return self

    def ids(self) -> list[TransportID]:
        """Registered identifiers in registration order."""
        return list(self._transports)

    def register(self, transport: Transport, *, replace: bool = False) -> None:
        """Register a transport under its transport_id.

        Args:
            transport: Transport instance to register
            replace: If True, overwrite an existing entry for the same ID

        Raises:
            ValueError: If the ID is already taken by a different transport
            RuntimeError: If the registry is frozen
        """
        if self._frozen:
            raise RuntimeError(
                f"Cannot register {transport!r}: registry is frozen. "
                f"Build a new one with default_registry() to add transports."
            )
        transport_id = TransportID(transport.transport_id)
        existing = self._transports.get(transport_id)
        if existing is not None and existing is not transport and not replace:
            raise ValueError(
                f"Transport ID {transport_id.char!r} already registered to {existing!r}. "
                f"Cannot register {transport!r} without replace=True."
            )
        self._transports[transport_id] = transport

    def get(self, transport_id: int) -> Transport:
        """Return the transport for an identifier byte.

        Raises:
            ValueError: If transport_id is not a byte (0-255)
            UnsupportedTransport: If the identifier is reserved or unregistered
        """
        key = TransportID.from_byte(transport_id)
        try:
            transport = self._transports[key]
        except KeyError:
            raise UnsupportedTransport(
                int(transport_id), f"No transport registered for ID {key.char!r}"
            ) from None
        logger.debug("Dispatching transport %r to %r", key.char, transport)
        return transport

    def compressor_for(self, transport_id: int) -> CompressFn:
        return self.get(transport_id).compress

    def decompressor_for(self, transport_id: int) -> DecompressFn:
        return self.get(transport_id).decompress


def default_registry(level: int = DEFAULT_LEVEL) -> TransportRegistry:
    """Build a registry holding the standard '0' transport at the given level."""
    return TransportRegistry([ZstdTransport(level=level)])


# Shared by encode/decode when no registry is given.
DEFAULT_REGISTRY = default_registry().freeze()

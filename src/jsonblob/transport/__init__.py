"""Transport registry for jsonblob envelopes.

This module maps the envelope's leading identifier byte to a compression
scheme. Only '0' (Zstandard) is assigned; all other bytes are reserved.
"""

from __future__ import annotations

from .base import CompressFn, DecompressFn, Transport, TransportID
from .registry import DEFAULT_REGISTRY, TransportRegistry, default_registry
from .zstd import DEFAULT_LEVEL, ZstdTransport

__all__ = [
    "TransportID",
    "Transport",
    "CompressFn",
    "DecompressFn",
    "ZstdTransport",
    "DEFAULT_LEVEL",
    "TransportRegistry",
    "DEFAULT_REGISTRY",
    "default_registry",
]

"""Zstandard transport (identifier '0')."""

from __future__ import annotations

import zstandard

from ..exceptions import CorruptPayload, EncodeError
from .base import Transport, TransportID

DEFAULT_LEVEL = 19


class ZstdTransport(Transport):
    """Single Zstandard frame, no dictionary, no checksum.

    Compression goes through a streaming compressor, so the frame header does
    not carry the content size. Decompression is streaming as well and accepts
    frames with or without a content size.

    Args:
        level: Zstandard compression level (default 19)
    """

    transport_id = TransportID.ZSTD

    def __init__(self, level: int = DEFAULT_LEVEL) -> None:
        self.level = level

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level})"

    def compress(self, data: bytes) -> bytes:
        # Contexts are not thread-safe; build fresh ones per call.
        cctx = zstandard.ZstdCompressor(level=self.level)
        try:
            cobj = cctx.compressobj()
            return cobj.compress(data) + cobj.flush()
        except zstandard.ZstdError as e:
            raise EncodeError(f"Zstandard compression failed: {e}") from e

    def decompress(self, data: bytes) -> bytes:
        if not data:
            raise CorruptPayload("Compressed payload is empty")

        dobj = zstandard.ZstdDecompressor().decompressobj()
        try:
            result = dobj.decompress(data)
        except zstandard.ZstdError as e:
            raise CorruptPayload(f"Zstandard decompression failed: {e}") from e

        if not dobj.eof:
            raise CorruptPayload("Compressed payload is truncated")
        if dobj.unused_data:
            raise CorruptPayload(
                f"{len(dobj.unused_data)} trailing bytes after compressed frame"
            )

        return result

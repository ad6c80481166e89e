"""Envelope codec configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .transport import (
    DEFAULT_LEVEL,
    DEFAULT_REGISTRY,
    TransportID,
    TransportRegistry,
    default_registry,
)


class EnvelopeConfig(BaseModel):
    """Options shared by encode() and decode().

    Attributes:
        transport: Transport used by encode() (decode always dispatches on the
            envelope's own identifier byte)
        level: Zstandard compression level, 1-22
        trim_trailing: If True, decode() drops trailing garbage after the
            base64 payload instead of rejecting it

    Example:
        >>> config = EnvelopeConfig(level=3)
        >>> config.transport.char
        '0'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    transport: TransportID = TransportID.ZSTD
    level: int = Field(default=DEFAULT_LEVEL, ge=1, le=22)
    trim_trailing: bool = False

    def build_registry(self) -> TransportRegistry:
        """Registry matching this configuration's compression level."""
        if self.level == DEFAULT_LEVEL:
            return DEFAULT_REGISTRY
        return default_registry(self.level)


DEFAULT_CONFIG = EnvelopeConfig()

"""Data models for SMUS score representation."""

from smusconv.models.chunk import Chunk, SMUSFile, SMUSHeader
from smusconv.models.events import DecodedEvent, SEvent, SEventType

__all__ = [
    "Chunk",
    "SMUSFile",
    "SMUSHeader",
    "DecodedEvent",
    "SEvent",
    "SEventType",
]

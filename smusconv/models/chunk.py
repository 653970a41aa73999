"""
IFF chunk and SMUS header models.
"""

from dataclasses import dataclass, field
from typing import List

# Size of a chunk header: 4-byte tag + 4-byte big-endian size
CHUNK_HEADER_SIZE = 8


@dataclass(frozen=True)
class Chunk:
    """
    A tagged region of an IFF container.

    ``length`` is the total span (header + payload) before alignment padding.
    """

    tag: str
    offset: int
    length: int

    @property
    def payload_offset(self) -> int:
        return self.offset + CHUNK_HEADER_SIZE

    @property
    def payload_size(self) -> int:
        return self.length - CHUNK_HEADER_SIZE

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def next_offset(self) -> int:
        """Offset of the following chunk, after 2-byte alignment."""
        end = self.end
        return end + 1 if end % 2 else end

    def payload(self, data: bytes) -> bytes:
        return data[self.payload_offset : self.end]


@dataclass
class SMUSHeader:
    """Fixed SMUS header (FORM + SMUS + SHDR)."""

    form_length: int
    shdr_length: int
    tempo_raw: int
    volume: int
    track_count: int

    @property
    def tempo_bpm(self) -> float:
        """Header tempo in quarter notes per minute (stored in 1/128ths)."""
        return self.tempo_raw / 128.0


@dataclass
class SMUSFile:
    """Parsed SMUS container: fixed header plus the chunks that follow it."""

    header: SMUSHeader
    chunks: List[Chunk] = field(default_factory=list)
    raw_data: bytes = field(default=b"", repr=False)

    @property
    def track_chunks(self) -> List[Chunk]:
        return [c for c in self.chunks if c.tag == "TRAK"]

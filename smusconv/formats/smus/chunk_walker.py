"""
IFF chunk walker for the variable part of an SMUS container.

Chunks follow the fixed SHDR header back to back:

    tag (4 ASCII) | size (4, big-endian, payload only) | payload | pad byte if odd

Known tags:
    TRAK   track data (SEvents)
    INS1   instrument register: register, type, data1, data2, name
    NAME, (c) , AUTH, ANNO   text
"""

import logging
from typing import Callable, Iterator, List, Optional

from smusconv.models.chunk import CHUNK_HEADER_SIZE, Chunk
from smusconv.utils.validation import StructuralError, read_chunk_length, read_tag

logger = logging.getLogger(__name__)

TRACK_TAG = "TRAK"
INSTRUMENT_TAG = "INS1"

# INS1 payload bytes before the instrument name
INSTRUMENT_NAME_OFFSET = 4

TrackHandler = Callable[[Chunk], None]


def decode_text(raw: bytes) -> str:
    """Decode a text field, dropping NUL padding."""
    return raw.decode("latin-1").rstrip("\x00")


class ChunkWalker:
    """
    Walks chunks from ``start`` up to ``end`` and dispatches them by tag.

    Track chunks go to ``on_track``; instrument and text chunks are only
    logged.

    Example:
        walker = ChunkWalker(data, start=24, end=header.form_length, on_track=handle)
        chunks = walker.walk()
    """

    def __init__(
        self,
        data: bytes,
        start: int,
        end: int,
        on_track: Optional[TrackHandler] = None,
    ):
        if end > len(data):
            raise StructuralError(
                f"Declared container end {end} is past the end of the data ({len(data)} bytes)"
            )
        self.data = data
        self.start = start
        self.end = end
        self.on_track = on_track

    def iter_chunks(self) -> Iterator[Chunk]:
        """
        Yield chunks in file order without dispatching them.

        Raises:
            StructuralError: If a chunk header or body crosses the container end
        """
        offset = self.start
        while offset < self.end:
            if offset + CHUNK_HEADER_SIZE > self.end:
                raise StructuralError(f"Truncated chunk header at offset {offset}")

            tag = read_tag(self.data, offset)
            length = read_chunk_length(self.data, offset + 4)
            chunk = Chunk(tag=tag, offset=offset, length=length)

            if chunk.end > self.end:
                raise StructuralError(
                    f"Chunk '{tag}' at offset {offset} with length {length} "
                    f"runs past the container end ({self.end})"
                )

            yield chunk
            offset = chunk.next_offset

    def walk(self) -> List[Chunk]:
        """
        Dispatch every chunk and return them in file order.

        Returns:
            List of chunks found
        """
        chunks = []
        for chunk in self.iter_chunks():
            self.dispatch(chunk)
            chunks.append(chunk)
        return chunks

    def dispatch(self, chunk: Chunk) -> None:
        """Route one chunk by tag."""
        if chunk.tag == TRACK_TAG:
            logger.info("Found track with length = %d", chunk.length)
            if self.on_track is not None:
                self.on_track(chunk)
        elif chunk.tag == INSTRUMENT_TAG:
            name = decode_text(chunk.payload(self.data)[INSTRUMENT_NAME_OFFSET:])
            logger.info(
                "Found instrument with length = %d and name = '%s' (not used)",
                chunk.length,
                name,
            )
        else:
            text = decode_text(chunk.payload(self.data))
            logger.info(
                "Found %s chunk with length = %d and text = '%s' (not used)",
                chunk.tag,
                chunk.length,
                text,
            )

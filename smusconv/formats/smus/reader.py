"""
SMUS file reader.

Validates the fixed header and lists the chunks of an IFF SMUS score.

Fixed header (big-endian):
    0x00-0x03: "FORM"
    0x04-0x07: FORM size
    0x08-0x0B: "SMUS"
    0x0C-0x0F: "SHDR"
    0x10-0x13: SHDR size
    0x14-0x15: Tempo (1/128 quarter notes per minute)
    0x16:      Volume (initial default velocity)
    0x17:      Track count
    0x18+:     Chunks
"""

import logging
import struct
from pathlib import Path
from typing import Union

from smusconv.formats.smus.chunk_walker import ChunkWalker
from smusconv.models.chunk import SMUSFile, SMUSHeader
from smusconv.utils.validation import (
    FIXED_HEADER_SIZE,
    ValidationError,
    is_smus_header,
    read_chunk_length,
    validate_smus_header,
)

logger = logging.getLogger(__name__)


class SMUSReader:
    """
    Reader for IFF SMUS score files.

    Example:
        score = SMUSReader.read("song.smus")
        print(f"Tracks: {len(score.track_chunks)}, Volume: {score.header.volume}")
    """

    # First chunk after the fixed header
    CHUNKS_START = FIXED_HEADER_SIZE

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> SMUSFile:
        """
        Read an SMUS file and list its chunks.

        Args:
            filepath: Path to the SMUS file

        Returns:
            Parsed SMUSFile
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        return cls.parse_bytes(filepath.read_bytes())

    @classmethod
    def parse_header(cls, data: bytes) -> SMUSHeader:
        """
        Validate and decode the fixed header.

        Args:
            data: Raw file contents

        Returns:
            Decoded header

        Raises:
            StructuralError: If a mandatory tag is missing
        """
        validate_smus_header(data)
        logger.info("FORM chunk found. File is an IFF file.")

        header = SMUSHeader(
            form_length=read_chunk_length(data, 4),
            shdr_length=read_chunk_length(data, 16),
            tempo_raw=struct.unpack(">H", data[20:22])[0],
            volume=data[22],
            track_count=data[23],
        )

        logger.info("FORM chunk length = %d", header.form_length)
        logger.info("SHDR chunk length = %d", header.shdr_length)
        logger.info("Found tempo = %d (ignored, output tempo is fixed)", header.tempo_raw)
        logger.info("Found volume = %d", header.volume)
        logger.info("Found track number = %d", header.track_count)
        return header

    @classmethod
    def parse_bytes(cls, data: bytes) -> SMUSFile:
        """
        Parse SMUS data from bytes without decoding tracks.

        Args:
            data: Raw file contents

        Returns:
            Parsed SMUSFile
        """
        header = cls.parse_header(data)
        walker = ChunkWalker(data, cls.CHUNKS_START, header.form_length)
        chunks = list(walker.iter_chunks())
        return SMUSFile(header=header, chunks=chunks, raw_data=data)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like an SMUS score.

        Args:
            filepath: Path to check

        Returns:
            True if the FORM/SMUS/SHDR tags are present
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                return is_smus_header(f.read(16))
        except OSError:
            return False

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about an SMUS file without raising on bad data.

        Args:
            filepath: Path to the SMUS file

        Returns:
            Dictionary with file info
        """
        data = Path(filepath).read_bytes()

        info = {
            "valid": False,
            "size": len(data),
        }

        if len(data) >= 4:
            info["form"] = data[:4].decode("ascii", errors="replace")

        try:
            score = cls.parse_bytes(data)
        except ValidationError as e:
            info["error"] = str(e)
            return info

        info["valid"] = True
        info["tempo_raw"] = score.header.tempo_raw
        info["volume"] = score.header.volume
        info["track_count"] = score.header.track_count
        info["tracks_found"] = len(score.track_chunks)
        info["chunks"] = [c.tag for c in score.chunks]
        return info

"""
Data validation utilities for SMUS containers.
"""

import struct

FORM_TAG = b"FORM"
SMUS_TAG = b"SMUS"
SHDR_TAG = b"SHDR"

# FORM(4) size(4) SMUS(4) SHDR(4) size(4) tempo(2) volume(1) tracks(1)
FIXED_HEADER_SIZE = 24


class ValidationError(Exception):
    """Raised when SMUS data validation fails."""

    pass


class StructuralError(ValidationError):
    """Raised when the container layout cannot be decoded."""

    pass


def read_tag(data: bytes, offset: int) -> str:
    """
    Read a 4-character chunk tag.

    Args:
        data: Container bytes
        offset: Tag offset

    Returns:
        Tag as a string (non-ASCII bytes replaced)
    """
    return data[offset : offset + 4].decode("ascii", errors="replace")


def read_chunk_length(data: bytes, offset: int) -> int:
    """
    Read a big-endian chunk size and add the 8-byte chunk header.

    Args:
        data: Container bytes
        offset: Offset of the 4-byte size field

    Returns:
        Total chunk span in bytes (header + payload)

    Raises:
        StructuralError: If the size field runs past the buffer
    """
    if offset + 4 > len(data):
        raise StructuralError(f"Truncated chunk size field at offset {offset}")
    return struct.unpack(">I", data[offset : offset + 4])[0] + 8


def validate_smus_header(data: bytes) -> None:
    """
    Validate the fixed FORM/SMUS/SHDR header.

    Args:
        data: Container bytes

    Raises:
        StructuralError: If the buffer is too short or a tag does not match
    """
    if len(data) < FIXED_HEADER_SIZE:
        raise StructuralError(
            f"File too small for SMUS header: {len(data)} bytes (need {FIXED_HEADER_SIZE})"
        )
    if data[0:4] != FORM_TAG:
        raise StructuralError("Cannot find FORM chunk")
    if data[8:12] != SMUS_TAG:
        raise StructuralError("Cannot find SMUS form type")
    if data[12:16] != SHDR_TAG:
        raise StructuralError("Cannot find SHDR chunk")


def is_smus_header(data: bytes) -> bool:
    """
    Check for the three mandatory SMUS tags without raising.

    Args:
        data: File data (at least 16 bytes)

    Returns:
        True if the tags match
    """
    if len(data) < 16:
        return False
    return data[0:4] == FORM_TAG and data[8:12] == SMUS_TAG and data[12:16] == SHDR_TAG

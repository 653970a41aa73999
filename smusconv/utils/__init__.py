"""Utility functions for SMUSConv."""

from smusconv.utils.validation import (
    StructuralError,
    ValidationError,
    read_chunk_length,
    read_tag,
    validate_smus_header,
)

__all__ = [
    "StructuralError",
    "ValidationError",
    "read_chunk_length",
    "read_tag",
    "validate_smus_header",
]

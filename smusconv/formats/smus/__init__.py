"""SMUS format handlers."""

from smusconv.formats.smus.chunk_walker import ChunkWalker
from smusconv.formats.smus.decoder import SEventDecoder, iter_symbols
from smusconv.formats.smus.duration import note_duration
from smusconv.formats.smus.reader import SMUSReader

__all__ = ["ChunkWalker", "SEventDecoder", "SMUSReader", "iter_symbols", "note_duration"]

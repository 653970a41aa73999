"""Format handlers for IFF SMUS."""

from smusconv.formats.smus import ChunkWalker, SEventDecoder, SMUSReader

__all__ = ["ChunkWalker", "SEventDecoder", "SMUSReader"]

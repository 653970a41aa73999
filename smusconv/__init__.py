"""
SMUSConv - Converter from IFF SMUS scores to Standard MIDI Files.

This library provides tools to:
- Read IFF SMUS score files and list their chunks
- Decode SMUS track events (notes, rests, ties, chords, tuplets)
- Write the result as a type 1 MIDI file

Example usage:
    from smusconv import SMUSReader, SMUSToMidiConverter

    score = SMUSReader.read("song.smus")
    print(f"Tracks: {len(score.track_chunks)}")

    SMUSToMidiConverter().convert_file("song.smus")  # writes song.smus.mid
"""

__version__ = "0.1.0"
__author__ = "SMUSConv Contributors"

from smusconv.config import ConvertConfig, load_config
from smusconv.converters.smus_to_midi import SMUSToMidiConverter, smus_to_midi
from smusconv.formats.smus.reader import SMUSReader
from smusconv.models.chunk import Chunk, SMUSFile, SMUSHeader
from smusconv.utils.validation import StructuralError, ValidationError

__all__ = [
    "ConvertConfig",
    "load_config",
    "SMUSToMidiConverter",
    "smus_to_midi",
    "SMUSReader",
    "Chunk",
    "SMUSFile",
    "SMUSHeader",
    "StructuralError",
    "ValidationError",
]

"""
Converters from SMUS scores to MIDI.
"""

from smusconv.converters.midi_sink import MidiFileSink, MidiTrackHandle, OutputEventKind
from smusconv.converters.smus_to_midi import SMUSToMidiConverter, smus_to_midi
from smusconv.converters.tie_resolver import TieResolver, emit_track

__all__ = [
    "MidiFileSink",
    "MidiTrackHandle",
    "OutputEventKind",
    "SMUSToMidiConverter",
    "TieResolver",
    "emit_track",
    "smus_to_midi",
]

"""
MIDI output sink built on mido.

Tracks receive delta-timed events through MidiTrackHandle.append_event;
the file is only written by MidiFileSink.save.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

import mido

MIDI_CHANNEL = 0


class OutputEventKind(Enum):
    """Event kinds accepted by a track handle."""

    NOTE_ON = "note_on"
    PROGRAM_CHANGE = "program_change"
    END_OF_TRACK = "end_of_track"


class MidiTrackHandle:
    """Append-only view of one mido track."""

    def __init__(self, track: mido.MidiTrack):
        self.track = track

    def append_event(self, delta: int, kind: OutputEventKind, data: int = 0, data2: int = 0) -> None:
        """
        Append one event.

        Args:
            delta: Ticks since the previous event in this track
            kind: Event kind
            data: Pitch or program number
            data2: Velocity for NOTE_ON (0 = note off)
        """
        if delta < 0:
            raise ValueError(f"Negative delta time: {delta}")

        if kind is OutputEventKind.NOTE_ON:
            msg = mido.Message(
                "note_on",
                channel=MIDI_CHANNEL,
                note=data & 0x7F,
                velocity=min(data2, 127),
                time=delta,
            )
        elif kind is OutputEventKind.PROGRAM_CHANGE:
            msg = mido.Message(
                "program_change", channel=MIDI_CHANNEL, program=data & 0x7F, time=delta
            )
        elif kind is OutputEventKind.END_OF_TRACK:
            msg = mido.MetaMessage("end_of_track", time=delta)
        else:
            raise ValueError(f"Unknown event kind: {kind}")

        self.track.append(msg)

    def __len__(self) -> int:
        return len(self.track)


class MidiFileSink:
    """
    In-memory type 1 MIDI file.

    Example:
        sink = MidiFileSink(ticks_per_beat=500)
        handle = sink.create_track()
        handle.append_event(0, OutputEventKind.NOTE_ON, 60, 100)
        sink.save("song.mid")
    """

    def __init__(self, ticks_per_beat: int):
        self.midi = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)

    def create_track(self, name: Optional[str] = None) -> MidiTrackHandle:
        """Add a new empty track."""
        track = self.midi.add_track(name)
        return MidiTrackHandle(track)

    @property
    def track_count(self) -> int:
        return len(self.midi.tracks)

    def save(self, path: Union[str, Path]) -> Path:
        """Write the MIDI file, creating the parent directory."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.midi.save(str(path))
        return path

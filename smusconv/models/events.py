"""
SMUS event models.

An SMUS track payload is a flat run of 2-byte SEvents:

    byte 0: sID   (0-127 note pitch, 128 rest, 129+ control codes)
    byte 1: data  (for notes/rests a packed bit field, otherwise a value)

Note/rest data byte layout:
    bit 7     chord     (do not advance the clock)
    bit 6     tie out   (sound continues into the next note of same pitch)
    bits 5-4  tuplet    (0 = none, n = 2n/(2n+1) time scaling)
    bit 3     dot       (x1.5)
    bits 2-0  division  (0 = whole, 1 = half, 2 = quarter, ...)
"""

from dataclasses import dataclass
from enum import Enum


class SEventType(Enum):
    """SEvent type codes (sID)."""

    REST = 128
    INSTRUMENT = 129
    TIME_SIGNATURE = 130
    KEY_SIGNATURE = 131
    DYNAMIC = 132
    MIDI_CHANNEL = 133
    MIDI_PRESET = 134
    CLEF = 135
    TEMPO = 136
    MARK = 255


# Highest sID decoded with the note bit field (128 is the rest)
MAX_NOTE_ID = 128

CHORD_MASK = 0x80
TIE_OUT_MASK = 0x40
TUPLET_MASK = 0x30
TUPLET_SHIFT = 4
DOT_MASK = 0x08
DIVISION_MASK = 0x07

# Control codes that emit a MIDI program change
PROGRAM_CODES = (SEventType.INSTRUMENT.value, SEventType.MIDI_PRESET.value)


@dataclass(frozen=True)
class SEvent:
    """One decoded 2-byte symbol from a track payload."""

    sid: int
    data: int
    chord: bool = False
    tie_out: bool = False
    tuplet: int = 0
    dotted: bool = False
    division: int = 0

    @classmethod
    def from_bytes(cls, sid: int, data: int) -> "SEvent":
        """Build a symbol record, unpacking the bit field for notes and rests."""
        if sid > MAX_NOTE_ID:
            return cls(sid=sid, data=data)
        return cls(
            sid=sid,
            data=data,
            chord=bool(data & CHORD_MASK),
            tie_out=bool(data & TIE_OUT_MASK),
            tuplet=(data & TUPLET_MASK) >> TUPLET_SHIFT,
            dotted=bool(data & DOT_MASK),
            division=data & DIVISION_MASK,
        )

    @property
    def is_note(self) -> bool:
        return self.sid < MAX_NOTE_ID

    @property
    def is_rest(self) -> bool:
        return self.sid == SEventType.REST.value

    @property
    def has_duration(self) -> bool:
        """Notes and rests carry a duration and advance the clock."""
        return self.sid <= MAX_NOTE_ID

    @property
    def kind(self) -> str:
        """Short readable name of the symbol type."""
        if self.is_note:
            return "note"
        try:
            return SEventType(self.sid).name.lower()
        except ValueError:
            return "unknown"

    def __repr__(self) -> str:
        if self.is_note:
            return (
                f"Note({self.sid}, div={self.division}, dot={self.dotted}, "
                f"tuplet={self.tuplet}, tie={self.tie_out}, chord={self.chord})"
            )
        if self.is_rest:
            return f"Rest(div={self.division}, dot={self.dotted}, tuplet={self.tuplet})"
        return f"SEvent({self.kind}, {self.data})"


@dataclass
class DecodedEvent:
    """
    Absolute-time event produced by the SEvent decoder.

    ``data`` is the pitch for notes or the program number for
    program changes. A velocity of 0 marks a note off.
    """

    time: int
    data: int
    velocity: int = 0
    tied: bool = False
    program_change: bool = False
    consumed: bool = False

    @property
    def is_note_on(self) -> bool:
        return not self.program_change and self.velocity > 0

    @property
    def is_note_off(self) -> bool:
        return not self.program_change and self.velocity == 0

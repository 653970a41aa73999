"""
SMUS SEvent decoder.

Turns a TRAK chunk payload into absolute-time note and program events.

Per-symbol behavior:
    0-127   note: note on at clock, note off at clock + duration
    128     rest: advances the clock only
    129/134 instrument / MIDI preset: program change at clock
    132     dynamic: sets the running default velocity
    other   ignored
"""

import logging
from typing import Iterator, List, Tuple

from smusconv.formats.smus.duration import note_duration
from smusconv.models.events import PROGRAM_CODES, DecodedEvent, SEvent, SEventType

logger = logging.getLogger(__name__)

SEVENT_SIZE = 2


def iter_symbols(payload: bytes) -> Iterator[Tuple[int, SEvent]]:
    """
    Split a track payload into SEvent records.

    A trailing odd byte cannot hold a full symbol and is skipped.

    Args:
        payload: TRAK chunk payload

    Yields:
        (offset within payload, SEvent) tuples
    """
    usable = len(payload) - len(payload) % SEVENT_SIZE
    if usable != len(payload):
        logger.warning("Track payload has a trailing odd byte, ignoring it")

    for pos in range(0, usable, SEVENT_SIZE):
        yield pos, SEvent.from_bytes(payload[pos], payload[pos + 1])


class SEventDecoder:
    """
    Stateful decoder for one track.

    Holds the running clock (ticks from track start) and the default
    velocity applied to new notes.

    Example:
        decoder = SEventDecoder(quarter_ticks=500, velocity=100)
        events = decoder.decode_payload(chunk.payload(data))
    """

    def __init__(self, quarter_ticks: int, velocity: int, clock: int = 0):
        self.quarter_ticks = quarter_ticks
        self.velocity = velocity
        self.clock = clock

    def decode(self, symbol: SEvent) -> List[DecodedEvent]:
        """
        Decode one symbol and update the running state.

        Args:
            symbol: Symbol record

        Returns:
            Events produced by this symbol (possibly empty)
        """
        events: List[DecodedEvent] = []

        if symbol.has_duration:
            duration = note_duration(
                self.quarter_ticks, symbol.division, symbol.dotted, symbol.tuplet
            )

            if symbol.is_note:
                events.append(
                    DecodedEvent(time=self.clock, data=symbol.sid, velocity=self.velocity)
                )
                events.append(
                    DecodedEvent(
                        time=self.clock + duration,
                        data=symbol.sid,
                        velocity=0,
                        tied=symbol.tie_out,
                    )
                )

            if not symbol.chord:
                self.clock += duration

        elif symbol.sid in PROGRAM_CODES:
            events.append(DecodedEvent(time=self.clock, data=symbol.data, program_change=True))

        elif symbol.sid == SEventType.DYNAMIC.value:
            self.velocity = symbol.data

        logger.debug("t=%d %r -> %d event(s)", self.clock, symbol, len(events))
        return events

    def decode_payload(self, payload: bytes) -> List[DecodedEvent]:
        """
        Decode a whole track payload in discovery order.

        Args:
            payload: TRAK chunk payload

        Returns:
            Flat list of absolute-time events
        """
        events: List[DecodedEvent] = []
        for _, symbol in iter_symbols(payload):
            events.extend(self.decode(symbol))
        return events

"""
Tie resolution and delta-time emission.

Decoded events are stably sorted by absolute time, then written in one
pass. A tied note off swallows the note on of the same pitch that starts
at the same tick, so the sound carries on into the next note. Program
changes are emitted with a zero delta and leave the time reference alone.
"""

import logging
from typing import List, Optional

from smusconv.converters.midi_sink import MidiTrackHandle, OutputEventKind
from smusconv.models.events import DecodedEvent

logger = logging.getLogger(__name__)


def sort_events(events: List[DecodedEvent]) -> List[DecodedEvent]:
    """Stable sort by absolute time, keeping decode order for equal times."""
    return sorted(events, key=lambda e: e.time)


def find_tie_target(events: List[DecodedEvent], index: int) -> Optional[DecodedEvent]:
    """
    Find the note on continuing the tied note off at ``index``.

    Args:
        events: Sorted event list
        index: Position of the tied note off

    Returns:
        Unconsumed note on with the same pitch and time, or None
    """
    tied = events[index]
    for candidate in events[index + 1 :]:
        if (
            not candidate.consumed
            and candidate.is_note_on
            and candidate.data == tied.data
            and candidate.time == tied.time
        ):
            return candidate
    return None


class TieResolver:
    """
    Writes one track's decoded events to a track handle.

    Example:
        resolver = TieResolver(handle)
        resolver.emit(events)
    """

    def __init__(self, handle: MidiTrackHandle):
        self.handle = handle
        self.last_time = 0
        self.broken_ties = 0

    def emit(self, events: List[DecodedEvent]) -> int:
        """
        Sort, merge ties and append the events plus an end-of-track marker.

        Args:
            events: Decoded events in discovery order (marked as consumed in place)

        Returns:
            Number of events appended, including the end-of-track marker
        """
        ordered = sort_events(events)
        written = 0

        for index, event in enumerate(ordered):
            if event.consumed:
                continue

            if event.program_change:
                self.handle.append_event(0, OutputEventKind.PROGRAM_CHANGE, event.data)
                written += 1
                continue

            if event.is_note_off and event.tied:
                target = find_tie_target(ordered, index)
                if target is not None:
                    target.consumed = True
                    continue
                logger.warning(
                    "Cannot find tied event for note %d at tick %d. Ignoring tie.",
                    event.data,
                    event.time,
                )
                self.broken_ties += 1

            self._append_note(event)
            written += 1

        self.handle.append_event(0, OutputEventKind.END_OF_TRACK)
        return written + 1

    def _append_note(self, event: DecodedEvent) -> None:
        delta = event.time - self.last_time
        self.handle.append_event(delta, OutputEventKind.NOTE_ON, event.data, event.velocity)
        self.last_time = event.time


def emit_track(events: List[DecodedEvent], handle: MidiTrackHandle) -> int:
    """
    Convenience wrapper around TieResolver.

    Args:
        events: Decoded events for one track
        handle: Destination track

    Returns:
        Number of events appended
    """
    return TieResolver(handle).emit(events)

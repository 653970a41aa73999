"""
Display formatting utilities for CLI output.

Provides bar graphics, note names and duration labels.
"""

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

DIVISION_NAMES = ["1", "1/2", "1/4", "1/8", "1/16", "1/32", "1/64", "1/128"]


def value_bar(
    value: int,
    max_value: int = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a text-based bar graphic with value.

    Args:
        value: Current value
        max_value: Maximum value (default 127 for MIDI)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion

    Returns:
        Formatted string like "91 [████████░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)

    bar = filled_char * fill_count + empty_char * (width - fill_count)
    return f"{value:3d} [{bar}]"


def note_name(pitch: int) -> str:
    """Convert a MIDI pitch to a name like 'C4' (middle C = 60)."""
    return f"{NOTE_NAMES[pitch % 12]}{pitch // 12 - 1}"


def duration_label(division: int, dotted: bool, tuplet: int) -> str:
    """Readable note length, e.g. '1/4.' or '1/8 t3'."""
    label = DIVISION_NAMES[division] if division < len(DIVISION_NAMES) else f"2^-{division}"
    if dotted:
        label += "."
    if tuplet:
        label += f" t{2 * tuplet + 1}"
    return label


def flags_label(tie_out: bool, chord: bool) -> str:
    """Compact tie/chord flag string."""
    parts = []
    if tie_out:
        parts.append("tie")
    if chord:
        parts.append("chord")
    return ",".join(parts)

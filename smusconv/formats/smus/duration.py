"""
Note duration arithmetic.

Division 2 is a quarter note, each step up halves the length and each
step down doubles it. Results are truncated to whole ticks, first after
the base/dot scaling and again after the tuplet correction.
"""


def note_duration(quarter_ticks: int, division: int, dotted: bool = False, tuplet: int = 0) -> int:
    """
    Compute a note length in ticks.

    Args:
        quarter_ticks: Ticks per quarter note
        division: Duration class exponent (0 = whole ... 7 = 1/128)
        dotted: Dot flag (x1.5)
        tuplet: Tuplet class (0 = none, n scales by 2n/(2n+1))

    Returns:
        Duration in ticks
    """
    numerator = quarter_ticks * (3 if dotted else 2)
    denominator = 2
    if division <= 2:
        numerator <<= 2 - division
    else:
        denominator <<= division - 2

    duration = numerator // denominator

    if tuplet > 0:
        duration = duration * (2 * tuplet) // (2 * tuplet + 1)

    return duration

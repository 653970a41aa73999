"""Tests for SMUS note duration arithmetic."""

import pytest

from smusconv.formats.smus.duration import note_duration


class TestNoteDuration:
    """Test cases for note_duration."""

    @pytest.mark.parametrize("division", range(8))
    def test_plain_durations_are_powers_of_two(self, division):
        """Undotted, non-tuplet lengths are Q * 2^(2 - division)."""
        quarter = 512
        assert note_duration(quarter, division) == int(quarter * 2 ** (2 - division))

    def test_quarter_is_base_value(self):
        """Division 2 is exactly one quarter note."""
        assert note_duration(500, 2) == 500
        assert note_duration(480, 2) == 480

    def test_whole_and_half(self):
        """Lower divisions double the length."""
        assert note_duration(500, 0) == 2000
        assert note_duration(500, 1) == 1000

    def test_short_notes_truncate(self):
        """Fractional tick counts are truncated, not rounded."""
        # 500 / 32 = 15.625
        assert note_duration(500, 7) == 15
        # 500 / 8 = 62.5
        assert note_duration(500, 5) == 62

    def test_dotted(self):
        """Dot extends the length by half."""
        assert note_duration(500, 2, dotted=True) == 750
        assert note_duration(500, 3, dotted=True) == 375
        assert note_duration(512, 1, dotted=True) == note_duration(512, 1) * 3 // 2

    @pytest.mark.parametrize("tuplet, expected", [(1, 333), (2, 400), (3, 428)])
    def test_tuplets(self, tuplet, expected):
        """Tuplet class n scales by 2n/(2n+1) with truncation."""
        assert note_duration(500, 2, tuplet=tuplet) == expected

    def test_dotted_triplet(self):
        """Dot is applied before the tuplet correction."""
        # 500 * 0.5 * 1.5 = 375, then 375 * 2/3 = 250
        assert note_duration(500, 3, dotted=True, tuplet=1) == 250

    def test_all_defined_durations_positive(self):
        """Every class gives a positive length at the default resolution."""
        for division in range(8):
            for dotted in (False, True):
                for tuplet in range(4):
                    assert note_duration(500, division, dotted, tuplet) > 0

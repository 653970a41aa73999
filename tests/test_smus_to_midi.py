"""Tests for the SMUS to MIDI converter."""

import mido
import pytest

from smusconv.config import ConvertConfig
from smusconv.converters.smus_to_midi import SMUSToMidiConverter, smus_to_midi
from smusconv.utils.validation import StructuralError


def messages(track):
    return [(m.type, getattr(m, "note", getattr(m, "program", None)), m.time) for m in track]


class TestSMUSToMidiConverter:
    """Test cases for end-to-end conversion."""

    def test_single_note(self, single_note_data):
        """One quarter note gives exactly on, off, end of track."""
        midi = SMUSToMidiConverter().convert_bytes(single_note_data)

        assert midi.ticks_per_beat == 500
        assert len(midi.tracks) == 1

        on, off, end = midi.tracks[0]
        assert (on.type, on.note, on.velocity, on.time) == ("note_on", 60, 100, 0)
        assert (off.type, off.note, off.velocity, off.time) == ("note_on", 60, 0, 500)
        assert end.type == "end_of_track"
        assert end.time == 0

    def test_quarter_follows_resolution(self, single_note_data):
        """The quarter note length tracks the configured time division."""
        midi = SMUSToMidiConverter(ConvertConfig(ticks_per_beat=480)).convert_bytes(
            single_note_data
        )
        assert midi.tracks[0][1].time == 480

    def test_one_track_per_trak_chunk(self, score_data):
        """Every TRAK chunk becomes a MIDI track, text chunks do not."""
        midi = SMUSToMidiConverter().convert_bytes(score_data)

        assert len(midi.tracks) == 2
        assert messages(midi.tracks[0]) == [
            ("program_change", 5, 0),
            ("note_on", 60, 0),
            ("note_on", 60, 500),
            ("note_on", 64, 0),
            ("note_on", 64, 1000),
            ("end_of_track", None, 0),
        ]

    def test_velocity_resets_per_track(self, score_data):
        """A dynamic change in one track does not carry into the next."""
        midi = SMUSToMidiConverter().convert_bytes(score_data)

        assert midi.tracks[0][1].velocity == 100
        assert midi.tracks[1][0].velocity == 80

    def test_header_volume_is_default_velocity(self, make_smus, make_chunk, make_sevent):
        """Notes before any dynamic use the SHDR volume."""
        data = make_smus([make_chunk(b"TRAK", make_sevent(60))], volume=64)
        midi = SMUSToMidiConverter().convert_bytes(data)

        assert midi.tracks[0][0].velocity == 64

    def test_empty_score(self, make_smus):
        """A score without tracks gives an empty MIDI file."""
        midi = SMUSToMidiConverter().convert_bytes(make_smus([]))
        assert midi.tracks == []

    def test_bad_tag_raises(self, single_note_data):
        """Structural errors propagate."""
        data = b"FORX" + single_note_data[4:]

        with pytest.raises(StructuralError):
            SMUSToMidiConverter().convert_bytes(data)

    def test_broken_ties_counted(self, make_smus, make_chunk, make_sevent):
        """Unresolved ties are counted but do not fail the conversion."""
        data = make_smus([make_chunk(b"TRAK", make_sevent(60, tie=True) + make_sevent(62))])
        converter = SMUSToMidiConverter()
        midi = converter.convert_bytes(data)

        assert converter.broken_ties == 1
        assert len(midi.tracks[0]) == 5


class TestConvertFile:
    """Test cases for file based conversion."""

    def test_default_output_path(self, smus_file):
        """Output is written next to the input as <name>.mid."""
        out_path = SMUSToMidiConverter().convert_file(smus_file)

        assert out_path == smus_file.parent / "song.smus.mid"
        assert out_path.exists()

        midi = mido.MidiFile(str(out_path))
        assert midi.ticks_per_beat == 500
        assert len(midi.tracks) == 2

    def test_explicit_output_path(self, smus_file, tmp_path):
        """An explicit output path is honoured, directories are created."""
        target = tmp_path / "out" / "result.mid"
        out_path = SMUSToMidiConverter().convert_file(smus_file, target)

        assert out_path == target
        assert target.exists()

    def test_no_output_on_structural_error(self, tmp_path, single_note_data):
        """A rejected container leaves no output file behind."""
        source = tmp_path / "broken.smus"
        source.write_bytes(single_note_data[:8] + b"XXXX" + single_note_data[12:])

        with pytest.raises(StructuralError):
            SMUSToMidiConverter().convert_file(source)

        assert not (tmp_path / "broken.smus.mid").exists()

    def test_missing_source(self, tmp_path):
        """Missing input raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SMUSToMidiConverter().convert_file(tmp_path / "missing.smus")

    def test_output_dir(self, smus_file, tmp_path):
        """output_path_for can redirect into another directory."""
        converter = SMUSToMidiConverter()
        assert converter.output_path_for(smus_file, tmp_path / "mid") == tmp_path / "mid" / "song.smus.mid"

    def test_convenience_function(self, smus_file):
        """smus_to_midi returns the in-memory file."""
        midi = smus_to_midi(smus_file)
        assert len(midi.tracks) == 2

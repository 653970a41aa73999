"""Tests for the IFF chunk walker."""

import logging

import pytest

from smusconv.formats.smus.chunk_walker import ChunkWalker
from smusconv.utils.validation import StructuralError


def walker_for(data, on_track=None):
    """Walker over everything after the fixed header."""
    return ChunkWalker(data, 24, len(data), on_track)


class TestChunkWalker:
    """Test cases for ChunkWalker."""

    def test_chunk_lengths_include_header(self, make_smus, make_chunk):
        """Chunk length is the size field plus the 8-byte header."""
        data = make_smus([make_chunk(b"NAME", b"Song")])
        chunks = walker_for(data).walk()

        assert len(chunks) == 1
        assert chunks[0].tag == "NAME"
        assert chunks[0].offset == 24
        assert chunks[0].length == 12
        assert chunks[0].payload(data) == b"Song"

    def test_odd_length_skips_pad_byte(self, make_smus, make_chunk, make_sevent):
        """An odd chunk end is followed by one pad byte before the next tag."""
        data = make_smus([make_chunk(b"AUTH", b"abc"), make_chunk(b"TRAK", make_sevent(60))])
        chunks = walker_for(data).walk()

        assert [c.tag for c in chunks] == ["AUTH", "TRAK"]
        assert chunks[0].end == 24 + 11
        assert chunks[1].offset == 24 + 12

    def test_tracks_dispatched(self, score_data):
        """Only TRAK chunks reach the track handler, in file order."""
        seen = []
        chunks = walker_for(score_data, seen.append).walk()

        assert [c.tag for c in chunks] == ["NAME", "INS1", "TRAK", "TRAK"]
        assert [c.tag for c in seen] == ["TRAK", "TRAK"]
        assert seen[0].offset < seen[1].offset

    def test_text_chunks_logged(self, score_data, caplog):
        """Instrument and text chunks are reported, not used."""
        with caplog.at_level(logging.INFO):
            walker_for(score_data).walk()

        assert "name = 'Piano'" in caplog.text
        assert "Found NAME chunk" in caplog.text
        assert "text = 'Song'" in caplog.text

    def test_unknown_tag_treated_as_text(self, make_smus, make_chunk):
        """Unrecognized chunks are logged like text chunks."""
        data = make_smus([make_chunk(b"XTRA", b"\x01\x02")])
        seen = []
        chunks = walker_for(data, seen.append).walk()

        assert [c.tag for c in chunks] == ["XTRA"]
        assert seen == []

    def test_empty_body(self, make_smus):
        """No chunks after the header yields nothing."""
        data = make_smus([])
        assert walker_for(data).walk() == []

    def test_chunk_past_end_rejected(self, make_smus, make_chunk):
        """A size that runs past the container end is a structural error."""
        data = bytearray(make_smus([make_chunk(b"TRAK", b"\x3c\x02")]))
        data[31] = 0x40  # TRAK size 2 -> 64

        with pytest.raises(StructuralError, match="runs past the container end"):
            walker_for(bytes(data)).walk()

    def test_truncated_header_rejected(self, make_smus):
        """A partial chunk header at the end is a structural error."""
        data = make_smus([]) + b"TRA"

        with pytest.raises(StructuralError, match="Truncated chunk header"):
            walker_for(data).walk()

    def test_end_past_data_rejected(self, make_smus):
        """The walker refuses an end offset beyond the buffer."""
        data = make_smus([])

        with pytest.raises(StructuralError, match="past the end of the data"):
            ChunkWalker(data, 24, len(data) + 10)

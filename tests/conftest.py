"""Test configuration and fixtures."""

import struct

import pytest


def sevent(
    sid: int,
    division: int = 2,
    dotted: bool = False,
    tuplet: int = 0,
    tie: bool = False,
    chord: bool = False,
) -> bytes:
    """Encode a note or rest SEvent."""
    flags = division & 0x07
    if dotted:
        flags |= 0x08
    flags |= (tuplet & 0x03) << 4
    if tie:
        flags |= 0x40
    if chord:
        flags |= 0x80
    return bytes([sid, flags])


def chunk(tag: bytes, payload: bytes) -> bytes:
    """Encode an IFF chunk with its alignment pad byte."""
    data = tag + struct.pack(">I", len(payload)) + payload
    if len(payload) % 2:
        data += b"\x00"
    return data


def smus(chunks=(), volume: int = 100, tempo_raw: int = 120 * 128, track_count=None) -> bytes:
    """Build a complete FORM SMUS container."""
    if track_count is None:
        track_count = sum(1 for c in chunks if c[:4] == b"TRAK")
    body = (
        b"SMUS"
        + b"SHDR"
        + struct.pack(">I", 4)
        + struct.pack(">HBB", tempo_raw, volume, track_count)
        + b"".join(chunks)
    )
    return b"FORM" + struct.pack(">I", len(body)) + body


@pytest.fixture
def make_sevent():
    """Return the SEvent encoder."""
    return sevent


@pytest.fixture
def make_chunk():
    """Return the chunk encoder."""
    return chunk


@pytest.fixture
def make_smus():
    """Return the container builder."""
    return smus


@pytest.fixture
def single_note_data():
    """One quarter note C4 at volume 100."""
    return smus([chunk(b"TRAK", sevent(60))])


@pytest.fixture
def score_data():
    """Container with text, instrument and two track chunks."""
    return smus(
        [
            chunk(b"NAME", b"Song"),
            chunk(b"INS1", bytes([0, 0, 0, 0]) + b"Piano"),
            chunk(b"TRAK", bytes([129, 5]) + sevent(60) + sevent(64, tie=True) + sevent(64)),
            chunk(b"TRAK", bytes([132, 80]) + sevent(48, division=1)),
        ]
    )


@pytest.fixture
def smus_file(tmp_path, score_data):
    """Write the sample score to disk."""
    path = tmp_path / "song.smus"
    path.write_bytes(score_data)
    return path

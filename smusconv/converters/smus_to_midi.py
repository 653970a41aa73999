"""
SMUS to Standard MIDI File converter.

Each TRAK chunk becomes one MIDI track:

    chunk walker -> SEvent decoder -> tie resolver -> mido track

The output tempo is fixed by the configuration; the SHDR tempo is only
reported. Nothing is written to disk unless the whole container decodes.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import mido

from smusconv.config import ConvertConfig
from smusconv.converters.midi_sink import MidiFileSink
from smusconv.converters.tie_resolver import TieResolver
from smusconv.formats.smus.chunk_walker import ChunkWalker
from smusconv.formats.smus.decoder import SEventDecoder
from smusconv.formats.smus.reader import SMUSReader
from smusconv.models.chunk import Chunk

logger = logging.getLogger(__name__)


class SMUSToMidiConverter:
    """
    Converter from SMUS scores to MIDI files.

    Example:
        converter = SMUSToMidiConverter()
        out_path = converter.convert_file("song.smus")
    """

    def __init__(self, config: Optional[ConvertConfig] = None):
        self.config = config or ConvertConfig()
        self.broken_ties = 0

    def convert_bytes(self, data: bytes) -> mido.MidiFile:
        """
        Convert SMUS data to an in-memory MIDI file.

        Args:
            data: Raw SMUS file contents

        Returns:
            mido.MidiFile with one track per TRAK chunk

        Raises:
            StructuralError: If the container layout is invalid
        """
        return self.build_sink(data).midi

    def build_sink(self, data: bytes) -> MidiFileSink:
        """Decode every track of ``data`` into a new MIDI sink."""
        header = SMUSReader.parse_header(data)
        sink = MidiFileSink(self.config.ticks_per_beat)
        quarter_ticks = self.config.quarter_ticks
        self.broken_ties = 0

        def on_track(chunk: Chunk) -> None:
            handle = sink.create_track()
            decoder = SEventDecoder(quarter_ticks, header.volume)
            events = decoder.decode_payload(chunk.payload(data))
            resolver = TieResolver(handle)
            resolver.emit(events)
            self.broken_ties += resolver.broken_ties
            logger.debug(
                "Track %d: %d decoded events, %d MIDI events",
                sink.track_count,
                len(events),
                len(handle),
            )

        walker = ChunkWalker(data, SMUSReader.CHUNKS_START, header.form_length, on_track)
        walker.walk()

        logger.info("End of chunks, %d track(s) converted", sink.track_count)
        return sink

    def convert(self, filepath: Union[str, Path]) -> mido.MidiFile:
        """
        Convert an SMUS file to an in-memory MIDI file.

        Args:
            filepath: Path to the SMUS file

        Returns:
            mido.MidiFile
        """
        return self.convert_bytes(self._read(filepath))

    def _read(self, filepath: Union[str, Path]) -> bytes:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        data = filepath.read_bytes()
        logger.info("Read %d bytes from %s", len(data), filepath)
        return data

    def output_path_for(self, source: Union[str, Path], output_dir: Optional[Path] = None) -> Path:
        """Default output path: the source name plus the configured suffix."""
        source = Path(source)
        name = source.name + self.config.output_suffix
        return (output_dir or source.parent) / name

    def convert_file(
        self,
        source: Union[str, Path],
        output: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Convert an SMUS file and save the MIDI result.

        Args:
            source: Path to the SMUS file
            output: Output path (default: source name + output suffix)

        Returns:
            Path of the written MIDI file
        """
        sink = self.build_sink(self._read(source))
        out_path = sink.save(Path(output) if output else self.output_path_for(source))
        logger.info("Saved %s", out_path)
        return out_path


def smus_to_midi(
    filepath: Union[str, Path], config: Optional[ConvertConfig] = None
) -> mido.MidiFile:
    """
    Convenience function to convert an SMUS file.

    Args:
        filepath: Path to the SMUS file
        config: Conversion settings

    Returns:
        mido.MidiFile
    """
    converter = SMUSToMidiConverter(config)
    return converter.convert(filepath)

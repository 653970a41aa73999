"""
Rich table displays for SMUS file information.
"""

from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from smusconv.formats.smus.chunk_walker import INSTRUMENT_NAME_OFFSET, INSTRUMENT_TAG, decode_text
from smusconv.formats.smus.decoder import iter_symbols
from smusconv.formats.smus.duration import note_duration
from smusconv.models.chunk import Chunk, SMUSFile
from cli.display.formatters import duration_label, flags_label, note_name, value_bar

console = Console()


def chunk_summary(chunk: Chunk, data: bytes, max_len: int = 40) -> str:
    """Short description of a chunk's content."""
    if chunk.tag == "TRAK":
        return f"{chunk.payload_size // 2} SEvents"
    payload = chunk.payload(data)
    if chunk.tag == INSTRUMENT_TAG:
        text = decode_text(payload[INSTRUMENT_NAME_OFFSET:])
    else:
        text = decode_text(payload)
    text = "".join(c if c.isprintable() else "." for c in text)
    if len(text) > max_len:
        text = text[: max_len - 3] + "..."
    return escape(text)


def display_smus_info(score: SMUSFile, filepath: Path) -> None:
    """Display header panel and chunk table."""
    header = score.header

    header_content = f"""[bold]File:[/bold] {escape(str(filepath))}
[bold]Size:[/bold] {len(score.raw_data)} bytes
[bold]FORM Length:[/bold] {header.form_length}
[bold]Tempo:[/bold] {header.tempo_bpm:.1f} BPM (raw: {header.tempo_raw}, not applied)
[bold]Volume:[/bold] {value_bar(header.volume, width=12)}
[bold]Tracks:[/bold] {header.track_count} declared, {len(score.track_chunks)} found"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]SMUS Score Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    table = Table(title="Chunks", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("Offset", style="dim", width=8)
    table.add_column("Tag", style="cyan", width=6)
    table.add_column("Length", justify="right", width=8)
    table.add_column("Content", width=42)

    for idx, chunk in enumerate(score.chunks):
        table.add_row(
            str(idx),
            f"0x{chunk.offset:04X}",
            escape(chunk.tag),
            str(chunk.length),
            chunk_summary(chunk, score.raw_data),
        )

    console.print(table)


def display_track_symbols(number: int, payload: bytes, quarter_ticks: int) -> None:
    """Display every SEvent of one track with its decoded fields."""
    table = Table(
        title=f"Track {number}",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold green",
    )
    table.add_column("Offset", style="dim", width=7)
    table.add_column("sID", width=4)
    table.add_column("Kind", style="cyan", width=15)
    table.add_column("Value", width=7)
    table.add_column("Length", width=10)
    table.add_column("Flags", width=10)
    table.add_column("Ticks", justify="right", width=6)

    for pos, symbol in iter_symbols(payload):
        if symbol.has_duration:
            ticks = note_duration(quarter_ticks, symbol.division, symbol.dotted, symbol.tuplet)
            value = note_name(symbol.sid) if symbol.is_note else ""
            table.add_row(
                f"0x{pos:04X}",
                str(symbol.sid),
                symbol.kind,
                value,
                duration_label(symbol.division, symbol.dotted, symbol.tuplet),
                flags_label(symbol.tie_out, symbol.chord),
                str(ticks),
            )
        else:
            table.add_row(f"0x{pos:04X}", str(symbol.sid), symbol.kind, str(symbol.data), "", "", "")

    console.print(table)

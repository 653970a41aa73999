"""
Tracks command - decoded SEvent listing per track.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display import configure_logging, display_track_symbols

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="SMUS file to analyze"),
    track: Optional[int] = typer.Option(None, "--track", "-t", help="Show only this track (1-based)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
) -> None:
    """
    List the SEvents of each track.

    Notes show pitch name, length, tie/chord flags and the length in
    output ticks; control events show their raw value.
    """
    configure_logging(False)

    from smusconv.config import load_config
    from smusconv.formats.smus.reader import SMUSReader
    from smusconv.utils.validation import ValidationError

    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        score = SMUSReader.read(file)
    except ValidationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    chunks = score.track_chunks
    if not chunks:
        console.print("[yellow]No TRAK chunks found[/yellow]")
        return

    if track is not None and not 1 <= track <= len(chunks):
        console.print(f"[red]Error: Track must be 1-{len(chunks)}, got {track}[/red]")
        raise typer.Exit(1)

    quarter_ticks = load_config(config).quarter_ticks

    for number, chunk in enumerate(chunks, start=1):
        if track is not None and number != track:
            continue
        display_track_symbols(number, chunk.payload(score.raw_data), quarter_ticks)


if __name__ == "__main__":
    app()

"""
Convert command - SMUS scores to Standard MIDI Files.
"""

from pathlib import Path
from typing import List, Optional

import typer
import yaml
from rich.console import Console

from cli.display import configure_logging

console = Console()
app = typer.Typer()


@app.command()
def convert(
    sources: List[Path] = typer.Argument(..., help="SMUS files to convert"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for .mid files (default: next to input)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    ticks_per_beat: Optional[int] = typer.Option(
        None, "--ticks-per-beat", help="MIDI time division (default 500)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show chunk-by-chunk progress"),
) -> None:
    """
    Convert SMUS files to MIDI.

    Each input is written as <input>.mid. Files are converted one after
    another; a broken file is reported and skipped.

    Examples:

        smusconv convert song.smus

        smusconv convert *.smus -o out/
    """
    configure_logging(verbose)

    from smusconv.config import load_config
    from smusconv.converters.smus_to_midi import SMUSToMidiConverter
    from smusconv.utils.validation import ValidationError

    try:
        settings = load_config(config, ticks_per_beat=ticks_per_beat)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        console.print(f"[red]Error: Invalid config: {e}[/red]")
        raise typer.Exit(1)

    converter = SMUSToMidiConverter(settings)
    failed = 0

    for source in sources:
        console.print(f"Opening {source}...")

        if not source.exists():
            console.print(f"[red]Error: Cannot open file {source}[/red]")
            failed += 1
            continue

        try:
            output_path = converter.output_path_for(source, output_dir)
            converter.convert_file(source, output_path)
        except (ValidationError, OSError) as e:
            console.print(f"[red]Error: {e}[/red]")
            if verbose:
                console.print_exception()
            failed += 1
            continue

        console.print(f"[green]Converted:[/green] {source} -> {output_path}")
        if converter.broken_ties:
            console.print(f"[yellow]  {converter.broken_ties} tie(s) could not be resolved[/yellow]")

    if failed:
        console.print(f"[red]{failed} of {len(sources)} file(s) failed[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

"""
Info command - display SMUS header and chunk layout.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display import configure_logging, display_header_dump, display_smus_info

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="SMUS file to analyze"),
    hex_dump: bool = typer.Option(False, "--hex", "-x", help="Show annotated header bytes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log chunk discovery"),
) -> None:
    """
    Display SMUS score information.

    Shows the SHDR header fields and every chunk with offset, tag,
    length and a short content preview.
    """
    configure_logging(verbose)

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

    display_smus_info(score, file)

    if hex_dump:
        display_header_dump(score.raw_data)


if __name__ == "__main__":
    app()

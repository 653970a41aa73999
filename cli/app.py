"""
SMUSConv - Converter from IFF SMUS scores to Standard MIDI Files.

A CLI tool for converting and inspecting SMUS score files.
"""

import typer
from rich.console import Console

from cli.commands.info import info
from cli.commands.convert import convert
from cli.commands.tracks import tracks

__version__ = "0.1.0"

console = Console()

# Main app
app = typer.Typer(
    name="smusconv",
    help="Convert and inspect IFF SMUS score files.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="info")(info)
app.command(name="convert")(convert)
app.command(name="tracks")(tracks)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]smusconv[/bold] version {__version__}")
    console.print("[dim]Converter from IFF SMUS scores to Standard MIDI Files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    SMUSConv - Convert IFF SMUS scores to MIDI.

    [bold]Quick Start:[/bold]

        smusconv convert song.smus      # Writes song.smus.mid
        smusconv convert *.smus -o out  # Batch conversion

    [bold]Analysis Commands:[/bold]

        smusconv info song.smus         # Header and chunk layout
        smusconv info song.smus --hex   # Annotated header bytes
        smusconv tracks song.smus       # Decoded SEvents per track

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()

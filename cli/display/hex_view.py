"""
Hex dump display for the fixed SMUS header.
"""

from typing import List, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()

# Header fields: start, end, label, color
HEADER_FIELDS: List[Tuple[int, int, str, str]] = [
    (0x00, 0x04, "FORM tag", "bright_blue"),
    (0x04, 0x08, "FORM size", "cyan"),
    (0x08, 0x0C, "SMUS tag", "bright_blue"),
    (0x0C, 0x10, "SHDR tag", "bright_blue"),
    (0x10, 0x14, "SHDR size", "cyan"),
    (0x14, 0x16, "Tempo", "yellow"),
    (0x16, 0x17, "Volume", "green"),
    (0x17, 0x18, "Track count", "magenta"),
]


def display_header_dump(data: bytes) -> None:
    """Display the fixed header one field per line."""
    lines = []

    for start, end, label, color in HEADER_FIELDS:
        chunk = data[start:end]
        text = Text()
        text.append(f"0x{start:02X} ", style="dim")
        text.append(f"{label:<12} ", style=color)
        text.append(" ".join(f"{b:02X}" for b in chunk).ljust(12))
        text.append("  ")
        text.append("".join(chr(b) if 32 <= b < 127 else "." for b in chunk), style="cyan")
        lines.append(text)

    console.print(Panel(Text("\n").join(lines), title="SMUS Header", border_style="blue", expand=False))

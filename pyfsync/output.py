"""Console output formatting for the pyfsync CLI."""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .utils import format_size


class OutputFormatter:
    """Writes human-readable or JSON output to the terminal."""

    def __init__(self, json_output: bool = False, quiet: bool = False):
        """Initialize output formatter.

        Args:
            json_output: Emit machine-readable JSON instead of text
            quiet: Suppress non-essential output
        """
        self.json_output = json_output
        self.quiet = quiet
        self.console = Console(highlight=False, soft_wrap=True)
        self.err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    def print(self, message: str = "") -> None:
        """Print a plain message (suppressed in quiet and JSON modes)."""
        if self.quiet or self.json_output:
            return
        self.console.print(escape(message))

    def info(self, message: str) -> None:
        """Print an informational message."""
        if self.quiet or self.json_output:
            return
        self.console.print(escape(message))

    def success(self, message: str) -> None:
        """Print a success message."""
        if self.quiet or self.json_output:
            return
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        """Print a warning to stderr."""
        self.err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Print an error to stderr, even in quiet mode."""
        self.err_console.print(f"[red]Error:[/red] {escape(message)}")

    def output_json(self, data: Any) -> None:
        """Print data as JSON to stdout."""
        self.console.print_json(json.dumps(data))

    def format_size(self, size_bytes: int) -> str:
        return format_size(size_bytes)

    def print_summary(self, title: str, stats: dict[str, int]) -> None:
        """Print sync statistics as a table, or as JSON in JSON mode."""
        if self.json_output:
            self.output_json(stats)
            return
        if self.quiet:
            return

        table = Table(title=title, show_header=False)
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        for key, value in stats.items():
            label = key.replace("_", " ").capitalize()
            shown = self.format_size(value) if key == "bytes_copied" else str(value)
            table.add_row(label, shown)
        self.console.print(table)

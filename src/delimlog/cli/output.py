"""
Output renderers for CLI diagnostics.
"""

from rich.console import Console
from rich.table import Table

from delimlog.application.format_logs import FormatStats
from delimlog.config.options import FormatterOption

__all__ = ["render_summary", "render_options"]


def render_summary(stats: FormatStats, destination: str, console: Console) -> None:
    """Print a one-line run summary."""
    dropped_style = "yellow" if stats.dropped else "dim"
    console.print(
        f"[bold]{destination}[/bold]: "
        f"[cyan]{stats.records}[/cyan] records from "
        f"{stats.entries} entries in {stats.batches} batches "
        f"([{dropped_style}]{stats.dropped} dropped[/{dropped_style}])"
    )


def _format_default(option: FormatterOption) -> str:
    if option.default is None:
        return "[red]required[/red]" if option is not FormatterOption.LOCAL_TIME_FIELD_NAME else "-"
    if option.default == "":
        return '""'
    if isinstance(option.default, bool):
        return str(option.default).lower()
    return str(option.default)


def render_options(console: Console) -> None:
    """Render the recognized formatter options as a Rich table."""
    table = Table(title="Formatter Options")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Default", style="green", no_wrap=True)
    table.add_column("Description")

    for option in FormatterOption:
        table.add_row(option.key, _format_default(option), option.description)

    console.print(table)

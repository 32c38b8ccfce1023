"""
Main CLI entry point for delimlog.

Uses the application layer use case and infrastructure adapters.
"""

import logging
import sys

import click
from rich.console import Console

from delimlog import __version__
from delimlog.config.options import FormatterOption
from delimlog.infrastructure.sources.decoding import DEFAULT_BATCH_SIZE

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="delimlog")
@click.option("--quiet", "-q", is_flag=True, help="Suppress the run summary")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """
    delimlog - structured log entries to delimited lines

    Reads JSON-lines log entries, selects and orders fields by a column
    list, and writes one delimited record per entry to stdout.

    Examples:

    \b
        delimlog format --columns host,level,message --destination app entries.jsonl
        delimlog format -c a,b,c -d app --append-timestamp --use-record-time -
        delimlog format --option columns=a,b --option destination=app entries.jsonl
        delimlog options
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["error_console"] = error_console


@cli.command(name="format")
@click.argument("file", required=False, type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--columns", "-c", help="Comma-separated ordered field list")
@click.option("--destination", "-d", help="Sink identifier attached to every record")
@click.option("--separator", "-s", help="Single delimiter character (default: ,)")
@click.option("--line-end", help="Suffix appended after the last field (default: empty)")
@click.option(
    "--use-record-time/--use-local-time", default=None,
    help="Timestamp source: entry time or local wall-clock time"
)
@click.option(
    "--append-timestamp/--no-append-timestamp", default=None,
    help="Append a trailing timestamp column"
)
@click.option(
    "--append-local-time/--no-append-local-time", default=None,
    help="Overwrite --local-time-field with local time"
)
@click.option("--local-time-field", help="Column overwritten with local time")
@click.option(
    "--drop-percent", type=click.IntRange(0, 100),
    help="Percentage of entries randomly discarded"
)
@click.option(
    "--batch-size", "-b", type=click.IntRange(min=1), default=DEFAULT_BATCH_SIZE,
    show_default=True, help="Entries per batch"
)
@click.option(
    "--option", "-o", "option_pairs", multiple=True, metavar="KEY=VALUE",
    help="Set any formatter option by key (repeatable)"
)
@click.pass_context
def format_(
    ctx: click.Context,
    file: str | None,
    columns: str | None,
    destination: str | None,
    separator: str | None,
    line_end: str | None,
    use_record_time: bool | None,
    append_timestamp: bool | None,
    append_local_time: bool | None,
    local_time_field: str | None,
    drop_percent: int | None,
    batch_size: int,
    option_pairs: tuple[str, ...],
) -> None:
    """
    Format log entries into delimited records.

    FILE is a JSON-lines file of entries; omit it or pass - to read
    stdin. Records are written to stdout, one per line.

    Examples:

    \b
        delimlog format -c a,b,c -d app entries.jsonl
        delimlog format -c a,b,c -d app -s '|' --line-end ';' entries.jsonl
        cat entries.jsonl | delimlog format -c a,b -d app --drop-percent 90
    """
    from delimlog.cli.commands import format_command

    overrides = {
        FormatterOption.COLUMNS: columns,
        FormatterOption.DESTINATION: destination,
        FormatterOption.SEPARATOR_CHAR: separator,
        FormatterOption.LINE_END: line_end,
        FormatterOption.USE_RECORD_TIME: use_record_time,
        FormatterOption.APPEND_TIMESTAMP: append_timestamp,
        FormatterOption.APPEND_LOCAL_TIME: append_local_time,
        FormatterOption.LOCAL_TIME_FIELD_NAME: local_time_field,
        FormatterOption.DROP_PERCENT: drop_percent,
    }
    exit_code = format_command(
        file_path=file,
        option_pairs=option_pairs,
        overrides=overrides,
        batch_size=batch_size,
        quiet=ctx.obj.get("quiet", False),
        console=ctx.obj["console"],
        error_console=ctx.obj["error_console"],
    )
    ctx.exit(exit_code)


@cli.command()
@click.pass_context
def options(ctx: click.Context) -> None:
    """
    List all recognized formatter options.

    These keys are accepted by --option and by load_formatter_config().
    """
    from delimlog.cli.output import render_options

    render_options(ctx.obj["console"])


if __name__ == "__main__":
    cli()

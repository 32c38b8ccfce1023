"""
CLI commands using the application layer use case.

This module wires the infrastructure adapters, the option loader and
the record formatter together for the `format` command.
"""

import logging
import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from delimlog.application.format_logs import FormatLogsUseCase
from delimlog.cli.output import render_summary
from delimlog.config.options import FormatterOption, load_formatter_config
from delimlog.core.exceptions import ConfigurationError, EntryDecodeError
from delimlog.formatter.record_formatter import RecordFormatter
from delimlog.infrastructure import JsonLinesBatchSource, StdinBatchSource, StreamTransport

__all__ = ["format_command", "parse_option_pairs", "create_source"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def create_source(file_path: str | None, batch_size: int):
    """
    Create the batch source for the input.

    Args:
        file_path: Path to an entry file, or None / "-" for stdin
        batch_size: Maximum entries per batch
    """
    if file_path is None or file_path == "-":
        return StdinBatchSource(batch_size=batch_size)
    return JsonLinesBatchSource(Path(file_path), batch_size=batch_size)


def parse_option_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """
    Parse repeated KEY=VALUE option flags.

    Raises:
        ConfigurationError: If a pair has no '='
    """
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ConfigurationError(f"Expected KEY=VALUE, got {pair!r}")
        options[key.strip()] = value
    return options


def format_command(
    file_path: str | None,
    option_pairs: tuple[str, ...],
    overrides: dict[FormatterOption, Any],
    batch_size: int,
    quiet: bool,
    console: Console,
    error_console: Console,
) -> int:
    """
    Execute the format command.

    Options given as dedicated flags override the same key passed via
    --option.

    Returns:
        Exit code (0 = success, 1 = input error, 2 = configuration error)
    """
    try:
        options: dict[str, Any] = parse_option_pairs(option_pairs)
        for option, value in overrides.items():
            if value is not None:
                options[option.key] = value
        config = load_formatter_config(options)
    except ConfigurationError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_CONFIG_ERROR

    formatter = RecordFormatter().configure(config)

    try:
        source = create_source(file_path, batch_size)
    except FileNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_INPUT_ERROR

    transport = StreamTransport(sys.stdout)
    use_case = FormatLogsUseCase(source=source, formatter=formatter, transport=transport)

    try:
        stats = use_case.execute()
    except EntryDecodeError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_INPUT_ERROR

    logger.debug("Source metadata: %s", source.metadata())
    if not quiet:
        render_summary(stats, config.destination, error_console)
    return EXIT_OK

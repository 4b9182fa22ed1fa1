"""
Converts a Markdown file to an HTML fragment.
The HTML is written to the given output path, or to stdout when none is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, apply_overrides, build_config
from .converter import convert_file
from .exceptions import ConvertFileError
from .filesystem import (
    get_max_file_size,
    get_max_line_length,
    normalize_filepath,
    resolve_output_path,
    write_html,
)

__all__ = ["cli"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("chat_markdown")


def configure_logging(verbose: bool) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Only warnings are shown unless `verbose` is set. Calling this again
    replaces the level but never adds a second handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


@click.command()
@click.version_option(package_name="chat-markdown")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=True, file_okay=True),
    help="File or directory to write the HTML to (default: stdout)",
)
@click.option("--max-file-size", type=int, help="Maximum input size in bytes")
@click.option("--max-line-length", type=int, help="Maximum input line length")
@click.option("--verbose", "-v", is_flag=True, help="Log conversion details to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output: str | None = None,
    max_file_size: int | None = None,
    max_line_length: int | None = None,
    verbose: bool = False,
):
    """
    Entry point for converting a Markdown file to HTML.

    Args:
        filepath: Path to the Markdown file to convert.
        output: File or directory receiving the HTML; stdout when omitted.
        max_file_size: Override for the maximum input size in bytes.
        max_line_length: Override for the maximum input line length.
        verbose: Whether to log debug details to stderr.

    Raises:
        click.BadParameter: If the input or output path is invalid or the
            configuration contains unsupported values.
        click.ClickException: If the input exceeds the limits, cannot be read,
            or the output cannot be written.

    Examples:
        chat-markdown notes.md -o notes.html
    """
    configure_logging(verbose)

    base_dir = Path.cwd().resolve()
    try:
        filepath = normalize_filepath(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            filepath.parent,
            max_file_size=max_file_size,
            max_line_length=max_line_length,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    # Environment limits apply only where no command-line override was given.
    try:
        config = apply_overrides(
            config,
            max_file_size=(
                None if max_file_size is not None else get_max_file_size(config.max_file_size)
            ),
            max_line_length=(
                None
                if max_line_length is not None
                else get_max_line_length(config.max_line_length)
            ),
        )
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        html = convert_file(filepath, config)
    except ConvertFileError as error:
        raise click.ClickException(str(error)) from error
    logger.debug("Converted %s (%d characters of HTML)", filepath, len(html))

    if output is None:
        click.echo(html)
        return

    try:
        target = resolve_output_path(output, filepath, config.output_suffix)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        write_html(target, html)
    except IOError as error:
        raise click.ClickException(str(error)) from error
    logger.info("Wrote %s", target)


if __name__ == "__main__":
    cli()

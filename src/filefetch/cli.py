"""
filefetch CLI.

Usage:
    filefetch get docs readme.txt --root ./docs
    filefetch get mirror data/report.csv --url https://files.example.com -o report.csv
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from filefetch import __version__
from filefetch.client import FileRetrievalClient
from filefetch.config import get_settings
from filefetch.logging import get_logger, setup_logging
from filefetch.transport import HttpConnection, LocalConnection, ServerConnection

err_console = Console(stderr=True)

logger = get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar="FILEFETCH_LOG_LEVEL",
    help="Log level for diagnostics on stderr",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=None,
    envvar="FILEFETCH_LOG_JSON",
    help="Emit logs as JSON lines",
)
@click.version_option(__version__, package_name="filefetch")
def main(log_level: str | None, log_json: bool | None) -> None:
    """filefetch: retrieve whole files from a server."""
    setup_logging(level=log_level, json_format=log_json)


# =============================================================================
# Get Command
# =============================================================================


@main.command()
@click.argument("server")
@click.argument("file_name", metavar="FILE")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Serve SERVER from this local directory",
)
@click.option("--url", help="Serve SERVER from this HTTP base URL")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write content here instead of stdout")
@click.option("--chunk-size", type=click.IntRange(min=1), help="Characters per read")
def get(
    server: str,
    file_name: str,
    root: Path | None,
    url: str | None,
    output: Path | None,
    chunk_size: int | None,
) -> None:
    """Retrieve FILE from SERVER.

    The file is written only if it was read completely. A file the server
    does not have yields empty output.

    Examples:

        filefetch get docs readme.txt --root ./docs

        filefetch get mirror report.csv --url https://files.example.com -o report.csv
    """
    if (root is None) == (url is None):
        raise click.UsageError("Pass exactly one of --root or --url")

    connection = _make_connection(server, root, url, chunk_size)
    result = FileRetrievalClient(connection).request_file(server, file_name)

    if not result.ok:
        err_console.print(f"[red]Error:[/red] could not retrieve '{file_name}' from '{server}'")
        raise SystemExit(1)

    if output is None:
        click.echo(result.content, nl=False)
    else:
        output.write_text(result.content, encoding=get_settings().encoding)
        err_console.print(f"[green]Saved[/green] {result.size:,} chars to {output}")


def _make_connection(
    server: str,
    root: Path | None,
    url: str | None,
    chunk_size: int | None,
) -> ServerConnection:
    settings = get_settings()
    chunk_size = chunk_size or settings.chunk_size

    if root is not None:
        logger.info(f"Serving {server!r} from {root}")
        return LocalConnection({server: root}, chunk_size=chunk_size, encoding=settings.encoding)

    logger.info(f"Serving {server!r} from {url}")
    return HttpConnection(
        {server: url},
        chunk_size=chunk_size,
        connect_timeout=settings.connect_timeout,
        request_timeout=settings.request_timeout,
    )

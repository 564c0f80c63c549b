"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated, Optional

import typer

from mdblocks.cli.commands import _fail, check_cmd, convert_cmd, headings_cmd, stats_cmd
from mdblocks.config import LOG_LEVELS, load_config


app = typer.Typer(name="mdblocks", no_args_is_help=True, help="Markdown to structured content blocks")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")] = None,
    ):
    """Configure logging before any command runs."""
    if log_level is None:
        try:
            log_level = load_config().log_level
        except ValueError:
            log_level = "WARNING"   # config errors are reported by the command itself
    if log_level.upper() not in LOG_LEVELS:
        _fail(f"Invalid log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}")
    logging.basicConfig(level=log_level.upper(), format='%(levelname)s: %(message)s')


app.command(name="convert")(convert_cmd)
app.command(name="headings")(headings_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="check")(check_cmd)

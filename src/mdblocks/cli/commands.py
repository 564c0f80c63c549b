"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblocks.config import Settings, load_config
from mdblocks.core.convert.convert import ConversionError, markdown_to_blocks
from mdblocks.core.extract.headings import extract_headings
from mdblocks.core.extract.stats import compute_stats
from mdblocks.core.models import Block
from mdblocks.core.parse import parse_file
from mdblocks.core.pipeline import run_convert
from mdblocks.core.validate import validate_blocks


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _load_blocks(path: str, settings: Settings) -> list[Block]:
    """Read and convert a single file, exiting with an error message on failure."""
    try:
        parsed = parse_file(Path(path), settings.max_file_size)
        return markdown_to_blocks(parsed.markdown, settings.parser_config)
    except (OSError, ValueError, ConversionError) as e:
        _fail(f"Could not convert {path}", e)


def convert_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    no_validate: Annotated[bool, typer.Option("--no-validate", help="Skip block validation")] = False,
    ):
    """Convert markdown files to JSON block documents."""
    settings = _settings(overrides={
        "output_dir": out, "parser_config": parser,
        "validate_output": False if no_validate else None,
    })
    try:
        results = run_convert(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo("No .md/.mdx files found.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Converted {len(results)} document(s) to {settings.output_dir}/")


def headings_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    ):
    """Print the heading outline of a markdown file."""
    settings = _settings()
    headings = extract_headings(_load_blocks(path, settings))
    if not headings:
        typer.echo("No headings found.")
        return
    for h in headings:
        typer.echo(f"{'  ' * (h.level - 1)}{h.text} (#{h.id})")


def stats_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    ):
    """Print block statistics of a markdown file as JSON."""
    settings = _settings()
    stats = compute_stats(_load_blocks(path, settings))
    typer.echo(json.dumps(stats.model_dump(by_alias=True), indent=2))


def check_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    ):
    """Convert a markdown file and validate the resulting blocks."""
    settings = _settings()
    blocks = _load_blocks(path, settings)
    if not validate_blocks(blocks):
        _fail(f"{path}: converted blocks failed validation")
    typer.echo(f"{path}: OK ({len(blocks)} blocks)")

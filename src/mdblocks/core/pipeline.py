"""Pipeline step: discover, parse, convert, validate and export markdown files"""

import logging
from pathlib import Path

from mdblocks.config import Settings
from mdblocks.core.convert.convert import markdown_to_blocks
from mdblocks.core.export import build_doc, write_doc
from mdblocks.core.models import ConvertedDoc
from mdblocks.core.parse import discover_files, parse_file
from mdblocks.core.validate import validate_blocks


logger = logging.getLogger(__name__)


def convert_file(path: Path, settings: Settings) -> ConvertedDoc:
    """Parse and convert a single file. Raises ValueError if validation is on and fails."""
    parsed = parse_file(path, settings.max_file_size)
    blocks = markdown_to_blocks(parsed.markdown, settings.parser_config)
    if settings.validate_output and not validate_blocks(blocks):
        raise ValueError("Converted blocks failed validation")
    return build_doc(parsed, blocks)


def run_convert(path: str, settings: Settings) -> list[tuple[Path, Path]]:
    """Convert path (file or directory) and write JSON to settings.output_dir.

    Returns (source_path, output_file) pairs. The first failing file aborts
    the run with a RuntimeError naming it.
    """
    output_dir = Path(settings.output_dir)
    results = []
    for p in discover_files(Path(path)):
        try:
            doc = convert_file(p, settings)
            out_file = write_doc(doc, output_dir, settings.json_indent)
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
        logger.info("Converted %s -> %s (%d blocks)", p, out_file, doc.stats.total_blocks)
        results.append((p, out_file))
    return results

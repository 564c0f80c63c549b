"""Export: assemble a ConvertedDoc and write it as JSON"""

from datetime import datetime
from pathlib import Path

from mdblocks.core.extract.headings import extract_headings
from mdblocks.core.extract.stats import compute_stats
from mdblocks.core.models import Block, ConvertedDoc, ParsedDoc
from mdblocks.core.utils.hashing import sha256


def build_doc(parsed: ParsedDoc, blocks: list[Block]) -> ConvertedDoc:
    """Combine a parsed file with its blocks and the outline/stats derived from them."""
    return ConvertedDoc(
        slug=parsed.slug,
        path=str(parsed.path),
        hash=sha256(parsed.raw_markdown),
        size=parsed.size,
        frontmatter=parsed.frontmatter,
        converted_at=datetime.now().isoformat(),
        blocks=blocks,
        headings=extract_headings(blocks),
        stats=compute_stats(blocks),
    )


def write_doc(doc: ConvertedDoc, output_dir: Path, indent: int = 2) -> Path:
    """Write doc to output_dir/<slug>.json with backend field names. Returns the path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    out_file = output_dir / f"{doc.slug}.json"
    out_file.write_text(
        doc.model_dump_json(by_alias=True, exclude_none=True, indent=indent or None),
        encoding='utf-8',
    )
    return out_file

"""Heading outline (table of contents) extraction from converted blocks"""

from mdblocks.core.models import Block, HeadingEntry, TextBlock
from mdblocks.core.utils.slug import heading_id


def _is_heading(block: Block) -> bool:
    return isinstance(block, TextBlock) and block.style.startswith('h') and bool(block.level)


def extract_headings(blocks: list[Block]) -> list[HeadingEntry]:
    """Return one entry per heading block in source order; span texts are joined without separator."""
    headings = []
    for block in blocks:
        if not _is_heading(block):
            continue
        text = ''.join(span.text for span in block.children)
        headings.append(HeadingEntry(id=heading_id(text), text=text, level=block.level))
    return headings

"""Aggregate statistics over a converted block sequence"""

from collections import Counter

from mdblocks.core.models import Block, CodeBlock, ConversionStats, ImageBlock, TableBlock, TextBlock


def compute_stats(blocks: list[Block]) -> ConversionStats:
    """Count blocks by type; heading_count includes every hN style regardless of level."""
    type_counts: Counter[str] = Counter()
    headings = code_blocks = images = tables = 0

    for block in blocks:
        type_counts[block.type] += 1
        if isinstance(block, TextBlock):
            if block.style.startswith('h'):
                headings += 1
        elif isinstance(block, CodeBlock):
            code_blocks += 1
        elif isinstance(block, ImageBlock):
            images += 1
        elif isinstance(block, TableBlock):
            tables += 1

    return ConversionStats(
        total_blocks=len(blocks),
        block_type_counts=dict(type_counts),
        heading_count=headings,
        code_block_count=code_blocks,
        image_count=images,
        table_count=tables,
    )

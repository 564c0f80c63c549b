"""Dispatch markdown-it block nodes to their lowerers and flatten the result"""

import logging

from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.convert.blocks import (
    convert_blockquote,
    convert_code,
    convert_heading,
    convert_hr,
    convert_list,
    convert_paragraph,
    convert_table,
    placeholder_block,
)
from mdblocks.core.convert.highlight import detect_highlight
from mdblocks.core.models import Block
from mdblocks.core.parse import parse_markdown
from mdblocks.core.utils.keys import KeyGen, new_key


logger = logging.getLogger(__name__)


class ConversionError(RuntimeError):
    """Raised when a markdown document cannot be converted to blocks."""


def convert_node(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[Block]:
    """Lower one top-level node; unknown node types degrade to an empty block."""
    match node.type:
        case 'heading':
            return convert_heading(node, keygen)
        case 'paragraph':
            return convert_paragraph(node, keygen)
        case 'fence' | 'code_block':
            return convert_code(node, keygen)
        case 'blockquote':
            highlight = detect_highlight(node, keygen)
            return [highlight] if highlight else convert_blockquote(node, keygen)
        case 'bullet_list' | 'ordered_list':
            return convert_list(node, keygen)
        case 'table':
            return convert_table(node, keygen)
        case 'hr':
            return convert_hr(node, keygen)
        case _:
            logger.debug("Unsupported block node %r; emitting placeholder", node.type)
            return [placeholder_block(keygen)]


def convert_tree(root: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[Block]:
    """Convert every top-level child of root into one flat, ordered block list."""
    return [block for node in root.children for block in convert_node(node, keygen)]


def markdown_to_blocks(
    markdown: str,
    parser_config: str = 'gfm-like',
    keygen: KeyGen = new_key,
    ) -> list[Block]:
    """Parse markdown and lower it to blocks. Empty input yields [].

    Any failure aborts the whole conversion and surfaces as ConversionError;
    the underlying exception is chained but not repeated in the message.
    """
    if not markdown.strip():
        return []
    try:
        return convert_tree(parse_markdown(markdown, parser_config), keygen)
    except Exception as e:
        logger.exception("Markdown conversion failed")
        raise ConversionError("Markdown conversion failed") from e


def blocks_to_json(blocks: list[Block]) -> list[dict]:
    """Serialise blocks with backend field names (_type, _key, listItem...), omitting unset fields."""
    return [block.model_dump(by_alias=True, exclude_none=True) for block in blocks]

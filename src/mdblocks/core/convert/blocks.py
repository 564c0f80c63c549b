"""Block-level lowerers: one function per markdown-it block node type.

Every lowerer returns a list so the dispatcher can flatten results; lists
produce one block per item, everything else exactly one block.
"""

import re
from typing import Optional

from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.convert.inline import convert_inline, convert_inline_children
from mdblocks.core.models import (
    CodeBlock,
    ImageBlock,
    SeparatorBlock,
    Span,
    TableBlock,
    TableCell,
    TableRow,
    TextBlock,
)
from mdblocks.core.utils.keys import KeyGen, new_key


FILENAME_RE = re.compile(r'''(?:title|filename)=(?:"([^"]*)"|'([^']*)'|(\S+))''')


def _inline_of(node: SyntaxTreeNode) -> Optional[SyntaxTreeNode]:
    """Return the `inline` child of a paragraph/heading/cell, else None."""
    return node.children[0] if node.children else None


def _paragraph_spans(node: SyntaxTreeNode, keygen: KeyGen) -> list[Span]:
    """Flatten inline content of the paragraph children of node; other children are dropped."""
    return [
        span
        for child in node.children if child.type == 'paragraph'
        for span in convert_inline_children(_inline_of(child), keygen)
    ]


def _standalone_image(inline: Optional[SyntaxTreeNode]) -> Optional[SyntaxTreeNode]:
    """Return the image node if it is the only meaningful inline child, else None."""
    if inline is None:
        return None
    meaningful = [
        c for c in inline.children
        if c.type not in ('softbreak', 'hardbreak')
        and not (c.type == 'text' and not c.content.strip())
    ]
    if len(meaningful) == 1 and meaningful[0].type == 'image':
        return meaningful[0]
    return None


def convert_heading(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[TextBlock]:
    depth = int(node.tag[1:])
    return [TextBlock(
        key=keygen(),
        style=f'h{depth}',
        level=depth,
        children=convert_inline_children(_inline_of(node), keygen),
    )]


def convert_paragraph(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[TextBlock | ImageBlock]:
    """Paragraph -> normal TextBlock, or ImageBlock when it holds a single image."""
    inline = _inline_of(node)
    image = _standalone_image(inline)
    if image is not None:
        return [convert_image(image, keygen)]
    return [TextBlock(key=keygen(), style='normal', children=convert_inline_children(inline, keygen))]


def convert_image(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> ImageBlock:
    """Image node -> ImageBlock carrying the source as an unresolved asset reference."""
    return ImageBlock(
        key=keygen(),
        asset_ref=str(node.attrs.get('src', '')),
        alt=node.content or None,
        caption=node.attrs.get('title') or None,
    )


def _split_info(info: str) -> tuple[Optional[str], Optional[str]]:
    """Split a fence info string into (language, filename)."""
    lang, _, rest = info.strip().partition(' ')
    m = FILENAME_RE.search(rest)
    filename = next((g for g in m.groups() if g), None) if m else None
    return lang or None, filename


def convert_code(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[CodeBlock]:
    """Fenced or indented code; the literal is passed through without mark composition."""
    language, filename = _split_info(node.info if node.type == 'fence' else '')
    code = node.content
    if code.endswith('\n'):
        code = code[:-1]
    return [CodeBlock(key=keygen(), language=language, filename=filename, code=code)]


def convert_blockquote(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[TextBlock]:
    """Blockquote -> one blockquote-styled TextBlock; only paragraph children contribute."""
    return [TextBlock(key=keygen(), style='blockquote', children=_paragraph_spans(node, keygen))]


def convert_list(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[TextBlock]:
    """One TextBlock per list item. Nested lists are not walked."""
    list_type = 'number' if node.type == 'ordered_list' else 'bullet'
    return [
        TextBlock(
            key=keygen(),
            style='normal',
            list_item=list_type,
            children=_paragraph_spans(item, keygen),
        )
        for item in node.children
    ]


def _convert_cell(cell: SyntaxTreeNode, keygen: KeyGen) -> TableCell:
    """Wrap each inline child of the cell in its own one-paragraph TextBlock.

    Children that produce no spans (empty text runs) get no block.
    """
    inline = _inline_of(cell)
    children = inline.children if inline is not None else []
    return TableCell(
        key=keygen(),
        content=[
            TextBlock(key=keygen(), style='normal', children=spans)
            for spans in (convert_inline(child, keygen) for child in children)
            if spans
        ],
    )


def convert_table(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[TableBlock]:
    """Header and body rows alike become TableRows, in source order."""
    rows = [
        TableRow(key=keygen(), cells=[_convert_cell(cell, keygen) for cell in tr.children])
        for section in node.children     # thead, tbody
        for tr in section.children
    ]
    return [TableBlock(key=keygen(), rows=rows)]


def convert_hr(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[SeparatorBlock]:
    return [SeparatorBlock(key=keygen())]


def placeholder_block(keygen: KeyGen = new_key) -> TextBlock:
    """Minimal empty block used for node types the engine does not recognise."""
    return TextBlock(key=keygen(), style='normal', children=[Span(key=keygen(), text='')])

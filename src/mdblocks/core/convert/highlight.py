"""Highlight (callout) detection for blockquotes written as `> **kind**: title`"""

import logging
import re
from typing import Optional

from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.convert.blocks import convert_blockquote
from mdblocks.core.models import HIGHLIGHT_KINDS, HighlightBlock
from mdblocks.core.utils.keys import KeyGen, new_key


logger = logging.getLogger(__name__)

HIGHLIGHT_RE = re.compile(rf'^\*\*({"|".join(HIGHLIGHT_KINDS)})\*\*:?\s*(.*)$', re.IGNORECASE)


def _first_line(node: SyntaxTreeNode) -> Optional[str]:
    """Raw source of the first line of the blockquote's leading paragraph, else None.

    The raw inline source is matched because the parser has already split
    `**kind**` into a separate strong node.
    """
    first = node.children[0] if node.children else None
    if first is None or first.type != 'paragraph' or not first.children:
        return None
    return first.children[0].content.split('\n', 1)[0]


def detect_highlight(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> Optional[HighlightBlock]:
    """Reclassify a blockquote as a HighlightBlock, or return None if it does not match.

    The trigger line is kept in `content` as well as copied into `title`.
    """
    line = _first_line(node)
    if line is None:
        return None
    m = HIGHLIGHT_RE.match(line.strip())
    if not m:
        return None
    kind, title = m.group(1).lower(), m.group(2).strip()
    logger.debug("Blockquote detected as %s highlight", kind)
    return HighlightBlock(
        key=keygen(),
        kind=kind,
        title=title or None,
        content=convert_blockquote(node, keygen),
    )

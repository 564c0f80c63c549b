"""Inline node -> Span conversion with recursive mark composition"""

import logging
from typing import Optional

from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.models import Span
from mdblocks.core.utils.keys import KeyGen, new_key


logger = logging.getLogger(__name__)

# markdown-it node type -> mark applied to every span beneath it
DECORATION_MARKS: dict[str, str] = {
    'strong': 'strong',
    'em':     'em',
    's':      'strike-through',
    'link':   'link',           # href is not carried into the output
}


def _with_mark(span: Span, mark: str) -> Span:
    """Return a copy of span with mark appended (ordered set: no duplicates)."""
    if mark in span.marks:
        return span
    return span.model_copy(update={'marks': [*span.marks, mark]})


def convert_inline(node: SyntaxTreeNode, keygen: KeyGen = new_key) -> list[Span]:
    """Convert one inline node to spans, innermost marks first. Empty text runs yield nothing."""
    match node.type:
        case 'text' if not node.content:
            return []
        case 'text':
            return [Span(key=keygen(), text=node.content)]
        case 'code_inline':
            return [Span(key=keygen(), text=node.content, marks=['code'])]
        case 'softbreak' | 'hardbreak':
            return [Span(key=keygen(), text='\n')]
        case 'strong' | 'em' | 's' | 'link':
            mark = DECORATION_MARKS[node.type]
            return [
                _with_mark(span, mark)
                for child in node.children
                for span in convert_inline(child, keygen)
            ]
        case _:
            logger.debug("Unsupported inline node %r; emitting empty span", node.type)
            return [Span(key=keygen(), text='')]


def convert_inline_children(inline: Optional[SyntaxTreeNode], keygen: KeyGen = new_key) -> list[Span]:
    """Flatten the spans of every child of an `inline` container node."""
    if inline is None:
        return []
    return [span for child in inline.children for span in convert_inline(child, keygen)]

"""Top-level shape check for converted block sequences"""

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel


logger = logging.getLogger(__name__)


def _as_dict(block: Any) -> Mapping[str, Any]:
    """Serialised form of a block; models are dumped with backend field names."""
    if isinstance(block, BaseModel):
        return block.model_dump(by_alias=True)
    return block


def _valid_span(span: Mapping[str, Any]) -> bool:
    return bool(span.get('_type')) and bool(span.get('_key')) and isinstance(span.get('text'), str)


def validate_blocks(blocks: Iterable[Any]) -> bool:
    """Return True if every block has _type/_key and every text block has well-formed spans.

    Accepts block models or already-serialised dicts. Highlight content and
    table cells are not descended into. Never raises: any error while
    checking counts as invalid.
    """
    try:
        for i, raw in enumerate(blocks):
            block = _as_dict(raw)
            if not block.get('_type') or not block.get('_key'):
                logger.debug("Block %d is missing _type or _key", i)
                return False
            if block['_type'] != 'block':
                continue
            children = block.get('children')
            if not isinstance(children, list):
                logger.debug("Block %d has no children list", i)
                return False
            if not all(_valid_span(span) for span in children):
                logger.debug("Block %d has a malformed span", i)
                return False
        return True
    except Exception:
        logger.debug("Validation raised; treating blocks as invalid", exc_info=True)
        return False

"""Unit tests for core/validate.py"""

import pytest

from mdblocks.core.convert.convert import blocks_to_json, markdown_to_blocks
from mdblocks.core.models import HighlightBlock, Span, TextBlock
from mdblocks.core.validate import validate_blocks


def _text_block(**overrides) -> dict:
    block = {
        "_type": "block",
        "_key": "b1",
        "style": "normal",
        "children": [{"_type": "span", "_key": "s1", "text": "hi", "marks": []}],
    }
    block.update(overrides)
    return block


def test_models_validate(sample_md):
    """Converted block models pass validation."""
    assert validate_blocks(markdown_to_blocks(sample_md))


def test_serialised_dicts_validate(sample_md):
    """Serialised blocks pass validation as well."""
    assert validate_blocks(blocks_to_json(markdown_to_blocks(sample_md)))


def test_empty_sequence_is_valid():
    assert validate_blocks([])


@pytest.mark.parametrize("block", [
    _text_block(_type=""),
    _text_block(_key=""),
    {"_type": "separator"},
    {"_key": "x"},
    _text_block(children=None),
    _text_block(children="not a list"),
    _text_block(children=[{"_type": "span", "_key": "s", "text": None}]),
    _text_block(children=[{"_type": "span", "_key": "", "text": "x"}]),
    _text_block(children=[{"_type": "", "_key": "s", "text": "x"}]),
])
def test_malformed_blocks_are_invalid(block):
    """Missing discriminants, non-list children, or malformed spans fail validation."""
    assert validate_blocks([_text_block(), block]) is False


def test_empty_span_text_is_allowed():
    """An empty string is a valid span text."""
    assert validate_blocks([_text_block(children=[{"_type": "span", "_key": "s", "text": ""}])])


def test_non_text_blocks_need_only_type_and_key():
    """Non-text blocks are checked for _type and _key only."""
    assert validate_blocks([{"_type": "codeBlock", "_key": "c1"}])


def test_highlight_content_is_not_descended():
    """Malformed spans nested inside highlight content are not inspected."""
    bad_inner = TextBlock(key="t", style="blockquote", children=[Span(key="", text="x")])
    block = HighlightBlock(key="h", kind="info", content=[bad_inner])
    assert validate_blocks([block])


@pytest.mark.parametrize("blocks", [[None], [42], None, [["nested"]]])
def test_unexpected_shapes_return_false(blocks):
    """Errors raised while checking are swallowed and reported as invalid."""
    assert validate_blocks(blocks) is False

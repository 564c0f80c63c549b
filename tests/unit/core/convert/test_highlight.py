"""Unit tests for core/convert/highlight.py"""

import pytest

from mdblocks.core.convert.highlight import detect_highlight


def _quote(parse, md: str):
    return parse(md).children[0]


def test_warning_with_title(parse, keygen):
    """`> **warning**: Be careful` becomes a warning highlight titled 'Be careful'."""
    block = detect_highlight(_quote(parse, "> **warning**: Be careful"), keygen)
    assert block is not None
    assert block.type == "highlightBlock"
    assert block.kind == "warning"
    assert block.title == "Be careful"


def test_trigger_line_kept_in_content(parse, keygen):
    """The trigger line is duplicated: it stays in content as a blockquote block."""
    block = detect_highlight(_quote(parse, "> **warning**: Be careful"), keygen)
    assert len(block.content) == 1
    inner = block.content[0]
    assert inner.style == "blockquote"
    assert "".join(s.text for s in inner.children) == "warning: Be careful"


@pytest.mark.parametrize("kind", ["info", "warning", "error", "success", "note"])
def test_all_kinds(parse, keygen, kind):
    """Every supported keyword is detected."""
    block = detect_highlight(_quote(parse, f"> **{kind}**: x"), keygen)
    assert block.kind == kind


def test_kind_is_case_insensitive(parse, keygen):
    """Keyword matching ignores case; kind is lowercased."""
    block = detect_highlight(_quote(parse, "> **INFO**: Heads up\n> more detail"), keygen)
    assert block.kind == "info"
    assert block.title == "Heads up"


def test_colon_is_optional(parse, keygen):
    """The colon after the keyword may be omitted."""
    block = detect_highlight(_quote(parse, "> **success** All done"), keygen)
    assert block.title == "All done"


def test_empty_title_is_absent(parse, keygen):
    """A bare keyword line leaves the title unset."""
    block = detect_highlight(_quote(parse, "> **note**"), keygen)
    assert block.kind == "note"
    assert block.title is None


@pytest.mark.parametrize("md", [
    "> plain quote",
    "> **tip**: not a supported kind",
    "> text then **warning**: late",
    "> - list first",
    "> *warning*: single asterisks",
])
def test_non_matching_returns_none(parse, keygen, md):
    """Blockquotes that do not open with a supported `**kind**` are left alone."""
    assert detect_highlight(_quote(parse, md), keygen) is None


def test_empty_blockquote_returns_none(parse, keygen):
    """A blockquote with no children is not a highlight."""
    assert detect_highlight(_quote(parse, ">\n"), keygen) is None


def test_content_spans_are_exact(parse, keygen):
    """Highlight content carries the trigger line's spans with no empty leading span."""
    block = detect_highlight(_quote(parse, "> **warning**: Be careful"), keygen)
    [inner] = block.content
    assert [(s.text, s.marks) for s in inner.children] == [
        ("warning", ["strong"]),
        (": Be careful", []),
    ]


def test_title_keeps_raw_inline_source(parse, keygen):
    """The title is taken verbatim from the source line; inline delimiters are not rendered."""
    block = detect_highlight(_quote(parse, "> **warning**: Be *careful* now"), keygen)
    assert block.title == "Be *careful* now"
    assert any(s.marks == ["em"] for s in block.content[0].children)

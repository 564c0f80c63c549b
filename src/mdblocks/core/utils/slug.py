"""Slug generation for document identifiers and heading anchors"""

import re


HEADING_ID_RE = re.compile(r'[^a-z0-9\u4e00-\u9fff]+')


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def heading_id(text: str) -> str:
    """Anchor id for a heading: runs outside [a-z0-9] and CJK ideographs collapse to '-'."""
    return HEADING_ID_RE.sub('-', text.lower()).strip('-')

"""File discovery, frontmatter extraction, and markdown-it tree parsing"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.models import ParsedDoc
from mdblocks.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}
MAX_FILE_SIZE = 10 * 1024 * 1024


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def parse_markdown(text: str, parser_config: str = 'gfm-like') -> SyntaxTreeNode:
    """Parse markdown text into a markdown-it syntax tree (root node)."""
    return SyntaxTreeNode(_make_parser(parser_config).parse(text))


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_file(path: Path, max_file_size: int = MAX_FILE_SIZE) -> ParsedDoc:
    """Read a markdown file into a ParsedDoc; rejects oversized files and empty bodies."""
    size = path.stat().st_size
    if size > max_file_size:
        raise ValueError(f"File too large: {size} bytes (max {max_file_size})")
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    if not body.strip():
        raise ValueError("File content is empty")
    slug = frontmatter.get('slug') or slugify(path.stem)
    return ParsedDoc(
        path=path,
        slug=slug,
        raw_markdown=raw,
        markdown=body,
        frontmatter=frontmatter,
        size=size,
    )

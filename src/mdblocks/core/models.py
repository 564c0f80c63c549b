"""Block, span and derived data models for the Markdown-to-blocks engine"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


MarkName = Literal['strong', 'em', 'code', 'strike-through', 'link']
TextStyle = Literal['normal', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'blockquote']
HighlightKind = Literal['info', 'warning', 'error', 'success', 'note']

HIGHLIGHT_KINDS: tuple[str, ...] = ('info', 'warning', 'error', 'success', 'note')


class _Node(BaseModel):
    """Base for every keyed output entity; serialises with backend field names."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str = Field(alias='_key')


class Span(_Node):
    """An inline run of text with an ordered, duplicate-free set of marks."""
    type: Literal['span'] = Field(default='span', alias='_type')
    text: str = ''
    marks: list[MarkName] = []


class TextBlock(_Node):
    """Paragraph, heading, blockquote or list item."""
    type: Literal['block'] = Field(default='block', alias='_type')
    style: TextStyle = 'normal'
    level: Optional[int] = Field(default=None, ge=1, le=6)     # set iff style is hN
    list_item: Optional[Literal['bullet', 'number']] = Field(default=None, alias='listItem')
    children: list[Span] = []


class CodeBlock(_Node):
    type: Literal['codeBlock'] = Field(default='codeBlock', alias='_type')
    language: Optional[str] = None
    filename: Optional[str] = None
    code: str = ''


class HighlightBlock(_Node):
    """Callout detected from a `> **kind**: title` blockquote."""
    type: Literal['highlightBlock'] = Field(default='highlightBlock', alias='_type')
    kind: HighlightKind
    title: Optional[str] = None
    content: list[TextBlock] = []


class ImageBlock(_Node):
    """Standalone image; asset_ref is the unresolved source, not an uploaded asset id."""
    type: Literal['image'] = Field(default='image', alias='_type')
    asset_ref: str = Field(alias='assetRef')
    alt: Optional[str] = None
    caption: Optional[str] = None


class TableCell(_Node):
    type: Literal['tableCell'] = Field(default='tableCell', alias='_type')
    content: list[TextBlock] = []


class TableRow(_Node):
    type: Literal['tableRow'] = Field(default='tableRow', alias='_type')
    cells: list[TableCell] = []


class TableBlock(_Node):
    type: Literal['table'] = Field(default='table', alias='_type')
    rows: list[TableRow] = []


class SeparatorBlock(_Node):
    type: Literal['separator'] = Field(default='separator', alias='_type')


Block = Annotated[
    Union[TextBlock, CodeBlock, HighlightBlock, ImageBlock, TableBlock, SeparatorBlock],
    Field(discriminator='type'),
]


class HeadingEntry(BaseModel):
    """One outline entry derived from a heading block."""
    id: str
    text: str
    level: int


class ConversionStats(BaseModel):
    """Aggregate counts over a converted block sequence."""
    model_config = ConfigDict(populate_by_name=True)

    total_blocks:      int = Field(default=0, alias='totalBlocks')
    block_type_counts: dict[str, int] = Field(default_factory=dict, alias='blockTypeCounts')
    heading_count:     int = Field(default=0, alias='headingCount')
    code_block_count:  int = Field(default=0, alias='codeBlockCount')
    image_count:       int = Field(default=0, alias='imageCount')
    table_count:       int = Field(default=0, alias='tableCount')


class ConvertedDoc(BaseModel):
    """Public output contract: one JSON file per converted source document."""
    slug: str
    path: str
    hash: str                       # sha256 of the raw file (frontmatter included)
    size: int                       # raw size in bytes
    frontmatter: dict[str, Any] = {}
    converted_at: str               # ISO-8601 timestamp
    blocks: list[Block]             # flat ordered list
    headings: list[HeadingEntry] = []
    stats: ConversionStats


@dataclass
class ParsedDoc:
    """Internal file-read result; not persisted."""
    path:         Path
    slug:         str
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    frontmatter:  dict[str, Any]
    size:         int          # bytes on disk

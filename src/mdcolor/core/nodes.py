"""Document tree node types consumed by the ANSI renderer"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional


@dataclass(eq=False)
class Node:
    """Base tree node. `parent` is a back-reference set by append(); it never owns the parent."""
    kind: ClassVar[str] = "node"

    children: list[Node] = field(default_factory=list, kw_only=True)
    parent:   Optional[Node] = field(default=None, repr=False, kw_only=True)

    def append(self, child: Node) -> Node:
        child.parent = self
        self.children.append(child)
        return child


@dataclass(eq=False)
class Document(Node):
    kind: ClassVar[str] = "document"


@dataclass(eq=False)
class Heading(Node):
    kind: ClassVar[str] = "heading"
    level: int = 1


@dataclass(eq=False)
class Paragraph(Node):
    kind: ClassVar[str] = "paragraph"


@dataclass(eq=False)
class ListBlock(Node):
    """Common base of ordered and bullet lists."""
    tight: bool = True


@dataclass(eq=False)
class OrderedList(ListBlock):
    kind: ClassVar[str] = "ordered_list"
    start:     int = 1
    delimiter: str = "."


@dataclass(eq=False)
class BulletList(ListBlock):
    kind: ClassVar[str] = "bullet_list"
    marker: str = "-"


@dataclass(eq=False)
class ListItem(Node):
    kind: ClassVar[str] = "list_item"


@dataclass(eq=False)
class BlockQuote(Node):
    kind: ClassVar[str] = "block_quote"


@dataclass(eq=False)
class Code(Node):
    """Inline code span; `delimiter` is the backtick run that opened it."""
    kind: ClassVar[str] = "code"
    literal:   str = ""
    delimiter: str = "`"


@dataclass(eq=False)
class FencedCodeBlock(Node):
    kind: ClassVar[str] = "fenced_code_block"
    literal:      str = ""
    fence_char:   str = "`"
    fence_length: int = 3
    info:         str = ""


@dataclass(eq=False)
class IndentedCodeBlock(Node):
    kind: ClassVar[str] = "indented_code_block"
    literal: str = ""


@dataclass(eq=False)
class Emphasis(Node):
    kind: ClassVar[str] = "emphasis"
    delimiter: str = "*"

    @property
    def opening_delimiter(self) -> str:
        return self.delimiter

    @property
    def closing_delimiter(self) -> str:
        return self.delimiter


@dataclass(eq=False)
class StrongEmphasis(Emphasis):
    kind: ClassVar[str] = "strong_emphasis"
    delimiter: str = "**"


@dataclass(eq=False)
class Link(Node):
    kind: ClassVar[str] = "link"
    destination: str = ""
    title:       Optional[str] = None


@dataclass(eq=False)
class Image(Link):
    kind: ClassVar[str] = "image"


@dataclass(eq=False)
class Text(Node):
    kind: ClassVar[str] = "text"
    literal: str = ""


@dataclass(eq=False)
class SoftLineBreak(Node):
    kind: ClassVar[str] = "soft_line_break"


@dataclass(eq=False)
class HardLineBreak(Node):
    kind: ClassVar[str] = "hard_line_break"


@dataclass(eq=False)
class ThematicBreak(Node):
    kind: ClassVar[str] = "thematic_break"


@dataclass(eq=False)
class HtmlBlock(Node):
    kind: ClassVar[str] = "html_block"
    literal: str = ""


@dataclass(eq=False)
class HtmlInline(Node):
    kind: ClassVar[str] = "html_inline"
    literal: str = ""


NODE_TYPES: tuple[type[Node], ...] = (
    Document, Heading, Paragraph, OrderedList, BulletList, ListItem, BlockQuote,
    Code, FencedCodeBlock, IndentedCodeBlock, Emphasis, StrongEmphasis, Link, Image,
    Text, SoftLineBreak, HardLineBreak, ThematicBreak, HtmlBlock, HtmlInline,
)


def in_tight_list(paragraph: Paragraph) -> bool:
    """True when the paragraph's grandparent is a tight list."""
    parent = paragraph.parent
    grandparent = parent.parent if parent is not None else None
    return isinstance(grandparent, ListBlock) and grandparent.tight

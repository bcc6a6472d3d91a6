"""Per-node rendering contexts and the stack the renderer keeps them on"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Mapping, NamedTuple, Optional

from mdcolor.core.nodes import Node


UNCHECKED_ITEM_TEXT = "[ ] "
CHECKED_ITEM_TEXTS = ("[x] ", "[X] ")
BULLET_GLYPH = "•"
DEFAULT_CHECKED_ITEM = "✓"
DEFAULT_UNCHECKED_ITEM = "☐"


class LinePrefix(NamedTuple):
    """What one context contributes at the start of a line."""
    text:   str
    color:  Optional[str] = None
    marker: bool = False        # True for a list item's own marker, False for continuation indent


@dataclass(eq=False)
class RenderContext:
    """Styling state for one open node; lives exactly as long as that node's visit."""
    node:         Node
    text_color:   Optional[str] = None
    prefix:       Optional[str] = None
    prefixer:     Optional[Callable[[str], str]] = None
    prefix_color: Optional[Callable[[str], Optional[str]]] = None
    transform:    Optional[Callable[[str], str]] = None
    index:        int = -1
    per_item:     bool = False
    item_open:    bool = field(default=False, repr=False)
    _indent:      str = field(default="", repr=False)

    def next_index(self) -> int:
        n = self.index
        self.index += 1
        return n

    def start_item(self) -> None:
        self.item_open = True

    def get_prefix(self, text: str) -> Optional[str]:
        if self.prefix is not None:
            return self.prefix
        if self.prefixer is not None:
            return self.prefixer(text)
        return None

    def get_prefix_color(self, text: str) -> Optional[str]:
        if self.prefix_color is not None:
            return self.prefix_color(text)
        return None

    def apply_transform(self, text: str) -> str:
        if self.transform is not None:
            return self.transform(text)
        return text

    def line_prefix(self, text: str) -> Optional[LinePrefix]:
        """Prefix for a line starting with text.

        List contexts emit their marker on the first line of each item and an
        indent of the same width on the item's continuation lines.
        """
        if not self.per_item:
            prefix = self.get_prefix(text)
            return LinePrefix(prefix, self.get_prefix_color(text)) if prefix else None

        if not self.item_open:
            return LinePrefix(self._indent) if self._indent else None

        self.item_open = False
        color = self.get_prefix_color(text)
        prefix = self.get_prefix(text) or ""
        self._indent = " " * len(prefix)
        return LinePrefix(prefix, color, marker=True)


class ContextStack:
    """Stack of open render contexts; iteration runs outermost to innermost."""

    def __init__(self) -> None:
        self._items: list[RenderContext] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RenderContext]:
        return iter(self._items)

    @property
    def top(self) -> Optional[RenderContext]:
        return self._items[-1] if self._items else None

    def push(self, ctx: RenderContext) -> RenderContext:
        self._items.append(ctx)
        return ctx

    def pop(self) -> RenderContext:
        return self._items.pop()

    @contextmanager
    def entered(self, ctx: RenderContext) -> Iterator[RenderContext]:
        """Push ctx for the duration of a with-block."""
        self.push(ctx)
        try:
            yield ctx
        finally:
            self.pop()

    def find(self, node: Node) -> Optional[RenderContext]:
        """Innermost context owned by node."""
        for ctx in reversed(self._items):
            if ctx.node is node:
                return ctx
        return None

    def text_color(self) -> Optional[str]:
        """Innermost explicit text color."""
        for ctx in reversed(self._items):
            if ctx.text_color is not None:
                return ctx.text_color
        return None


def ordered_counter(ctx: RenderContext, delimiter: str = ".") -> Callable[[str], str]:
    """Prefixer numbering list items from ctx.index upwards."""
    return lambda text: f"{ctx.next_index()}{delimiter} "


def _checklist_state(text: str) -> Optional[bool]:
    if text.startswith(UNCHECKED_ITEM_TEXT):
        return False
    if text.startswith(CHECKED_ITEM_TEXTS):
        return True
    return None


def checklist_glyph(
    options: Mapping[str, str],
    checked_color: Optional[str] = None,
    unchecked_color: Optional[str] = None,
    ) -> tuple[Callable[[str], str], Callable[[str], Optional[str]], Callable[[str], str]]:
    """Return (prefixer, prefix_color, transform) substituting glyphs for checklist markers."""
    checked = options.get("checked_item", DEFAULT_CHECKED_ITEM)
    unchecked = options.get("unchecked_item", DEFAULT_UNCHECKED_ITEM)

    def prefixer(text: str) -> str:
        state = _checklist_state(text)
        if state is None:
            return f"{BULLET_GLYPH} "
        return f"{checked if state else unchecked} "

    def prefix_color(text: str) -> Optional[str]:
        state = _checklist_state(text)
        if state is None:
            return None
        return checked_color if state else unchecked_color

    def transform(text: str) -> str:
        if _checklist_state(text) is None:
            return text
        return text[len(UNCHECKED_ITEM_TEXT):]

    return prefixer, prefix_color, transform

"""ANSI rendering engine: a depth-first visitor writing colorized text for each node kind"""

import io
import logging
from typing import Iterable, Mapping, Optional, TextIO

from mdcolor.core import nodes
from mdcolor.core.ansi import resolve_roles
from mdcolor.core.context import ContextStack, RenderContext, checklist_glyph, ordered_counter
from mdcolor.core.writer import OutputWriter


logger = logging.getLogger(__name__)


class AnsiRenderer:
    """Render document trees as ANSI-colored terminal text.

    colors maps role names ("code", "header", "linkHref", ...) to color specs and
    options maps option names ("checked_item", "unchecked_item") to values; both
    are matched case-insensitively. With plain=False the markdown punctuation is
    echoed alongside the color.
    """

    def __init__(
        self,
        colors: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, str]] = None,
        plain: bool = True,
        ) -> None:
        self.colors = {k.lower(): v for k, v in (colors or {}).items()}
        self.options = {k.lower(): v for k, v in (options or {}).items()}
        self.plain = plain

    def color(self, *roles: str) -> Optional[str]:
        """Escape for the first role in the fallback chain that has a color."""
        return resolve_roles(self.colors, *roles)

    def render(self, doc: nodes.Node, out: TextIO) -> None:
        """Write the rendering of doc to out."""
        logger.debug("Rendering %s in %s mode", doc.kind, "plain" if self.plain else "markdown")
        _RenderPass(self, OutputWriter(out)).visit(doc)

    def render_to_string(self, doc: nodes.Node) -> str:
        buf = io.StringIO()
        self.render(doc, buf)
        return buf.getvalue()


class _RenderPass:
    """State of a single render call: the context stack and the line-start flag."""

    def __init__(self, renderer: AnsiRenderer, writer: OutputWriter) -> None:
        self.renderer = renderer
        self.plain = renderer.plain
        self.color = renderer.color
        self.out = writer
        self.stack = ContextStack()
        self.at_line_start = True

    # --- plumbing ---

    def visit(self, node: nodes.Node) -> None:
        handler = getattr(self, f"visit_{node.kind}", None)
        if handler is None:
            raise TypeError(f"No renderer for node kind {node.kind!r}")
        handler(node)

    def visit_children(self, node: nodes.Node) -> None:
        for child in node.children:
            self.visit(child)

    def line(self) -> None:
        self.out.line()
        self.at_line_start = True

    def separate(self, text: str) -> None:
        self.out.raw(text)
        self.at_line_start = True

    def begin_run(self, text: str = "") -> Optional[RenderContext]:
        """Emit the prefixes pending at a line start before a run of output.

        Only text runs pass their literal: it is shown to the innermost open list
        item's prefixer, so checklist glyphs follow the text that will be stripped.
        Returns the context whose item marker was emitted, if any.
        """
        if not self.at_line_start:
            return None
        owner = next((c for c in reversed(list(self.stack)) if c.per_item and c.item_open), None)
        marked = None
        for ctx in self.stack:
            prefix = ctx.line_prefix(text if ctx is owner else "")
            if prefix is None:
                continue
            if prefix.text.strip():
                self.out.colorized(prefix.color or ctx.text_color, prefix.text)
            else:
                self.out.raw(prefix.text)
            if prefix.marker:
                marked = ctx
        self.at_line_start = False
        return marked

    def block_lines(self, lines: Iterable[str], escape: Optional[str]) -> None:
        """Write each line as its own colored run behind the pending prefixes."""
        for text in lines:
            self.begin_run()
            self.out.colorized(escape, text)
            self.separate("\n")

    # --- blocks ---

    def visit_document(self, node: nodes.Document) -> None:
        self.visit_children(node)
        self.line()

    def visit_heading(self, node: nodes.Heading) -> None:
        self.line()
        ctx = RenderContext(node, text_color=self.color("header"))
        if not self.plain:
            ctx.prefix = "#" * node.level + " "
        with self.stack.entered(ctx):
            self.visit_children(node)
            self.separate("\n\n")

    def visit_paragraph(self, node: nodes.Paragraph) -> None:
        tight = nodes.in_tight_list(node)
        if not tight:
            self.line()
        self.visit_children(node)
        if not tight:
            self.separate("\n\n")

    def visit_ordered_list(self, node: nodes.OrderedList) -> None:
        ctx = RenderContext(node, text_color=self.color("bullet"), index=node.start, per_item=True)
        ctx.prefixer = ordered_counter(ctx, "." if self.plain else node.delimiter)
        self._list_block(node, ctx)

    def visit_bullet_list(self, node: nodes.BulletList) -> None:
        ctx = RenderContext(node, text_color=self.color("bullet"), per_item=True)
        if self.plain:
            ctx.prefixer, ctx.prefix_color, ctx.transform = checklist_glyph(
                self.renderer.options, self.color("checked"), self.color("unchecked"),
            )
        else:
            ctx.prefix = f"{node.marker} "
        self._list_block(node, ctx)

    def _list_block(self, node: nodes.ListBlock, ctx: RenderContext) -> None:
        with self.stack.entered(ctx):
            self.line()
            self.visit_children(node)
        # nested lists run straight on into the enclosing item
        if not isinstance(node.parent, nodes.ListItem):
            self.separate("\n")

    def visit_list_item(self, node: nodes.ListItem) -> None:
        ctx = self.stack.find(node.parent)
        if ctx is not None:
            ctx.start_item()
        self.visit_children(node)
        if ctx is not None and ctx.item_open:
            self.begin_run()
            ctx.item_open = False
        self.line()

    def visit_block_quote(self, node: nodes.BlockQuote) -> None:
        ctx = RenderContext(node, text_color=self.color("blockquote"))
        if not self.plain:
            ctx.prefix = "> "
        with self.stack.entered(ctx):
            self.visit_children(node)

    def visit_indented_code_block(self, node: nodes.IndentedCodeBlock) -> None:
        self.line()
        lines = node.literal.splitlines()
        if not self.plain:
            lines = [f"    {text}" for text in lines]
        self.block_lines(lines, self.color("code"))

    def visit_fenced_code_block(self, node: nodes.FencedCodeBlock) -> None:
        self.line()
        lines = node.literal.splitlines()
        if not self.plain:
            fence = node.fence_char * node.fence_length
            lines = [fence, *lines, fence]
        self.block_lines(lines, self.color("code"))

    def visit_thematic_break(self, node: nodes.ThematicBreak) -> None:
        self.line()
        self.begin_run()
        self.out.raw("---")

    def visit_html_block(self, node: nodes.HtmlBlock) -> None:
        self.line()
        self.block_lines(node.literal.splitlines(), self.color("html"))

    # --- inlines ---

    def visit_text(self, node: nodes.Text) -> None:
        literal = node.literal
        marked = self.begin_run(literal)
        if marked is not None:
            literal = marked.apply_transform(literal)
        self.out.colorized(self.stack.text_color() or self.color("text"), literal)
        if node.literal:
            self.at_line_start = node.literal[-1] in "\r\n"

    def visit_code(self, node: nodes.Code) -> None:
        self.begin_run()
        text = node.literal
        if not self.plain:
            pad = " " if text.startswith("`") or text.endswith("`") else ""
            text = f"{node.delimiter}{pad}{text}{pad}{node.delimiter}"
        self.out.colorized(self.color("code"), text)

    def visit_emphasis(self, node: nodes.Emphasis) -> None:
        self._delimited(node, "emphasis")

    def visit_strong_emphasis(self, node: nodes.StrongEmphasis) -> None:
        self._delimited(node, "strong")

    def _delimited(self, node: nodes.Emphasis, role: str) -> None:
        escape = self.color(role)
        with self.stack.entered(RenderContext(node, text_color=escape)):
            if not self.plain:
                self.begin_run()
                self.out.colorized(escape, node.opening_delimiter)
            self.visit_children(node)
            if not self.plain:
                self.out.colorized(escape, node.closing_delimiter)

    def visit_link(self, node: nodes.Link) -> None:
        self._linked(node, "[", "link")

    def visit_image(self, node: nodes.Image) -> None:
        self._linked(node, "![", "image")

    def _linked(self, node: nodes.Link, opener: str, role: str) -> None:
        ctx = RenderContext(node, text_color=self.color(f"{role}Text", "text"))
        if not self.plain:
            self.begin_run()
            self.out.raw(opener)
        with self.stack.entered(ctx):
            self.visit_children(node)
        if self.plain:
            return
        self.out.raw("](")
        self.out.colorized(self.color(f"{role}Href", "href"), node.destination)
        if node.title is not None:
            self.out.colorized(self.color(f"{role}Title", "title"), f' "{node.title}"')
        self.out.raw(")")

    def visit_soft_line_break(self, node: nodes.SoftLineBreak) -> None:
        self.separate("\n")

    def visit_hard_line_break(self, node: nodes.HardLineBreak) -> None:
        self.separate("\n")

    def visit_html_inline(self, node: nodes.HtmlInline) -> None:
        self.begin_run()
        self.out.colorized(self.color("html"), node.literal)

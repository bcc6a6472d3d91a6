"""Unit tests for core/parse.py"""

from mdcolor.core import nodes
from mdcolor.core.parse import make_parser, parse_markdown, tokens_to_document


def _walk(node):
    yield node
    for child in node.children:
        yield from _walk(child)


def test_heading_level():
    """heading tokens map to Heading with the level taken from the tag."""
    doc = parse_markdown("### Title\n")
    heading = doc.children[0]
    assert isinstance(heading, nodes.Heading)
    assert heading.level == 3
    assert heading.children[0].literal == "Title"


def test_paragraph_parent_links():
    doc = parse_markdown("Hello\n")
    para = doc.children[0]
    assert isinstance(para, nodes.Paragraph)
    assert para.parent is doc
    assert para.children[0].parent is para


def test_tight_bullet_list():
    lst = parse_markdown("- a\n- b\n").children[0]
    assert isinstance(lst, nodes.BulletList)
    assert lst.tight
    assert lst.marker == "-"
    assert [type(c) for c in lst.children] == [nodes.ListItem, nodes.ListItem]


def test_loose_bullet_list():
    lst = parse_markdown("* a\n\n* b\n").children[0]
    assert not lst.tight
    assert lst.marker == "*"


def test_ordered_list_start_and_delimiter():
    lst = parse_markdown("7. x\n8. y\n").children[0]
    assert isinstance(lst, nodes.OrderedList)
    assert lst.start == 7
    assert lst.delimiter == "."
    assert parse_markdown("1) x\n").children[0].delimiter == ")"
    assert parse_markdown("1. x\n").children[0].start == 1


def test_fenced_code_block():
    block = parse_markdown("~~~~py\nx = 1\n~~~~\n").children[0]
    assert isinstance(block, nodes.FencedCodeBlock)
    assert block.fence_char == "~"
    assert block.fence_length == 4
    assert block.info == "py"
    assert block.literal == "x = 1\n"


def test_indented_code_block():
    block = parse_markdown("    a\n    b\n").children[0]
    assert isinstance(block, nodes.IndentedCodeBlock)
    assert block.literal == "a\nb\n"


def test_block_quote_and_thematic_break():
    doc = parse_markdown("> q\n\n---\n")
    assert isinstance(doc.children[0], nodes.BlockQuote)
    assert isinstance(doc.children[0].children[0], nodes.Paragraph)
    assert isinstance(doc.children[1], nodes.ThematicBreak)


def test_inline_nodes():
    """Inline tokens become emphasis, code, link and image nodes under the paragraph."""
    para = parse_markdown('*a* __b__ `c` [d](e "f") ![g](h)\n').children[0]
    kinds = [c.kind for c in para.children if not isinstance(c, nodes.Text)]
    assert kinds == ["emphasis", "strong_emphasis", "code", "link", "image"]

    em, strong, code, link, image = [c for c in para.children if not isinstance(c, nodes.Text)]
    assert em.delimiter == "*"
    assert strong.delimiter == "__"
    assert code.literal == "c"
    assert code.delimiter == "`"
    assert link.destination == "e"
    assert link.title == "f"
    assert link.children[0].literal == "d"
    assert image.destination == "h"
    assert image.title is None
    assert image.children[0].literal == "g"


def test_line_breaks():
    para = parse_markdown("a\nb  \nc\n").children[0]
    kinds = [c.kind for c in para.children]
    assert kinds == ["text", "soft_line_break", "text", "hard_line_break", "text"]


def test_checklist_text_stays_one_run():
    """'[ ] todo' is not a link, so the marker stays at the start of one text literal."""
    item = parse_markdown("- [ ] todo\n").children[0].children[0]
    text = item.children[0].children[0]
    assert isinstance(text, nodes.Text)
    assert text.literal == "[ ] todo"


def test_linkify():
    para = parse_markdown("see https://example.com now\n").children[0]
    links = [c for c in para.children if isinstance(c, nodes.Link)]
    assert links and links[0].destination == "https://example.com"


def test_linkify_disabled():
    para = parse_markdown("see https://example.com now\n", linkify=False).children[0]
    assert not any(isinstance(c, nodes.Link) for c in para.children)


def test_html_passthrough():
    doc = parse_markdown("<div>\nx\n</div>\n\na <b>c</b>\n")
    assert isinstance(doc.children[0], nodes.HtmlBlock)
    assert any(isinstance(n, nodes.HtmlInline) and n.literal == "<b>" for n in _walk(doc))


def test_unsupported_tokens_are_flattened():
    """Table cells from the gfm-like preset fall back to plain text nodes."""
    doc = parse_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n", preset="gfm-like")
    literals = [n.literal for n in _walk(doc) if isinstance(n, nodes.Text)]
    assert literals == ["a", "b", "1", "2"]


def test_tokens_to_document_from_parser():
    tokens = make_parser().parse("# T\n")
    doc = tokens_to_document(tokens)
    assert isinstance(doc, nodes.Document)
    assert isinstance(doc.children[0], nodes.Heading)


def test_empty_source():
    assert parse_markdown("").children == []

"""markdown-it tokenization and conversion of its syntax tree into document nodes"""

import logging
from typing import Callable

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdcolor.core import nodes
from mdcolor.core.nodes import Node


logger = logging.getLogger(__name__)

DEFAULT_PRESET = 'commonmark'


def make_parser(preset: str = DEFAULT_PRESET, linkify: bool = True) -> MarkdownIt:
    """Build a MarkdownIt instance; linkify turns bare URLs into links."""
    md = MarkdownIt(preset, options_update={"linkify": linkify})
    if linkify:
        md.enable("linkify")
    return md


def _heading_level(tag: str) -> int:
    """Heading level (1-6) from an h1..h6 tag."""
    if tag and tag[0] == 'h' and tag[1:].isdigit():
        return int(tag[1:])
    return 1


def _is_tight(list_node: SyntaxTreeNode) -> bool:
    """markdown-it hides the paragraphs of tight lists; a list without paragraphs counts as tight."""
    paragraphs = [
        child
        for item in list_node.children
        for child in item.children
        if child.type == 'paragraph'
    ]
    return all(p.hidden for p in paragraphs)


def _fence(src: SyntaxTreeNode) -> Node:
    markup = src.markup or '```'
    return nodes.FencedCodeBlock(
        literal=src.content,
        fence_char=markup[0],
        fence_length=len(markup),
        info=src.info.strip(),
    )


def _link(src: SyntaxTreeNode) -> Node:
    title = src.attrs.get('title')
    return nodes.Link(destination=str(src.attrs.get('href', '')), title=str(title) if title else None)


def _image(src: SyntaxTreeNode) -> Node:
    title = src.attrs.get('title')
    return nodes.Image(destination=str(src.attrs.get('src', '')), title=str(title) if title else None)


def _ordered_list(src: SyntaxTreeNode) -> Node:
    return nodes.OrderedList(
        start=int(src.attrs.get('start', 1)),
        tight=_is_tight(src),
        delimiter=src.markup or '.',
    )


def _bullet_list(src: SyntaxTreeNode) -> Node:
    return nodes.BulletList(marker=src.markup or '-', tight=_is_tight(src))


NODE_BUILDERS: dict[str, Callable[[SyntaxTreeNode], Node]] = {
    'heading':     lambda s: nodes.Heading(level=_heading_level(s.tag)),
    'paragraph':   lambda s: nodes.Paragraph(),
    'bullet_list': _bullet_list,
    'ordered_list': _ordered_list,
    'list_item':   lambda s: nodes.ListItem(),
    'blockquote':  lambda s: nodes.BlockQuote(),
    'fence':       _fence,
    'code_block':  lambda s: nodes.IndentedCodeBlock(literal=s.content),
    'hr':          lambda s: nodes.ThematicBreak(),
    'html_block':  lambda s: nodes.HtmlBlock(literal=s.content),
    'text':        lambda s: nodes.Text(literal=s.content),
    'softbreak':   lambda s: nodes.SoftLineBreak(),
    'hardbreak':   lambda s: nodes.HardLineBreak(),
    'em':          lambda s: nodes.Emphasis(delimiter=s.markup or '*'),
    'strong':      lambda s: nodes.StrongEmphasis(delimiter=s.markup or '**'),
    'link':        _link,
    'image':       _image,
    'code_inline': lambda s: nodes.Code(literal=s.content, delimiter=s.markup or '`'),
    'html_inline': lambda s: nodes.HtmlInline(literal=s.content),
}


def _convert_children(src: SyntaxTreeNode, dest: Node) -> None:
    """Append converted children of src to dest, flattening inline and unknown containers."""
    for child in src.children:
        builder = NODE_BUILDERS.get(child.type)
        if builder is not None:
            node = dest.append(builder(child))
            _convert_children(child, node)
        elif child.type == 'inline' or child.children:
            if child.type != 'inline':
                logger.debug("Flattening unsupported token %r", child.type)
            _convert_children(child, dest)
        elif child.content:
            logger.debug("Rendering unsupported token %r as text", child.type)
            dest.append(nodes.Text(literal=child.content))
        else:
            logger.debug("Dropping empty unsupported token %r", child.type)


def tokens_to_document(tokens: list) -> nodes.Document:
    """Convert a markdown-it token stream into a Document tree."""
    doc = nodes.Document()
    _convert_children(SyntaxTreeNode(tokens), doc)
    return doc


def parse_markdown(text: str, preset: str = DEFAULT_PRESET, linkify: bool = True) -> nodes.Document:
    """Parse markdown source into a Document tree."""
    return tokens_to_document(make_parser(preset, linkify).parse(text))

"""Render pipeline: read markdown, parse it, and write ANSI (or HTML) output"""

import logging
from pathlib import Path
from typing import Mapping, Optional, TextIO

from mdcolor.config import Settings, build_colors, build_options
from mdcolor.core.parse import make_parser, tokens_to_document
from mdcolor.core.render import AnsiRenderer


logger = logging.getLogger(__name__)


def make_renderer(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> AnsiRenderer:
    """Build an AnsiRenderer from settings plus MD_COL_/MD_OPT_ environment overrides."""
    return AnsiRenderer(
        colors=build_colors(settings, environ),
        options=build_options(settings, environ),
        plain=not settings.markdown,
    )


def render_markdown(
    text: str,
    settings: Settings,
    out: TextIO,
    environ: Optional[Mapping[str, str]] = None,
    ) -> None:
    """Parse markdown text and write its rendering to out."""
    parser = make_parser(settings.parser_config, settings.linkify)
    tokens = parser.parse(text)
    if settings.html:
        out.write(parser.renderer.render(tokens, parser.options, {}))
        return
    doc = tokens_to_document(tokens)
    make_renderer(settings, environ).render(doc, out)


def render_file(
    path: Path,
    settings: Settings,
    out: TextIO,
    environ: Optional[Mapping[str, str]] = None,
    ) -> None:
    """Read a markdown file and write its rendering to out. I/O errors propagate."""
    logger.debug("Rendering %s", path)
    with path.open(encoding="utf-8") as fh:
        text = fh.read()
    render_markdown(text, settings, out, environ)

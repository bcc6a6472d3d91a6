"""Shared fixtures for core unit tests"""

import pytest

from mdcolor.core.ansi import resolve
from mdcolor.core.parse import parse_markdown
from mdcolor.core.render import AnsiRenderer


COLORS = {
    "header":     "brightblue",
    "bullet":     "yellow",
    "code":       "red",
    "emphasis":   "green",
    "strong":     "orange",
    "blockquote": "gray",
    "href":       "orange",
    "linkText":   "brightblue",
    "title":      "green",
    "checked":    "brightgreen",
    "unchecked":  "orange",
}

SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

---

Footer paragraph.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="esc")
def esc_fixture():
    """Escape for a color spec, e.g. esc("red")."""
    return resolve


@pytest.fixture(name="render")
def render_fixture():
    """Render markdown source to a string: render(md, plain=True, colors=COLORS, options=None)."""
    def _render(md: str, plain: bool = True, colors: dict = None, options: dict = None) -> str:
        renderer = AnsiRenderer(COLORS if colors is None else colors, options, plain=plain)
        return renderer.render_to_string(parse_markdown(md))
    return _render

"""ANSI color resolution: color spec strings to SGR escape sequences"""

import logging
import re
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

ESC = "\x1b"
RESET = f"{ESC}[0m"
BOLD = 1
FG = 38
BG = 48

BOLD_PREFIX = "bold-"
BG_PREFIX = "bg-"

CUBE_RE = re.compile(r'^(?P<bold>bold-)?(?P<bg>bg-)?(?P<r>\d{1,2}),(?P<g>\d{1,2}),(?P<b>\d{1,2})$')


def cube_index(r: int, g: int, b: int) -> int:
    """Return the 256-color palette index of a 6x6x6 cube coordinate."""
    return 16 + 36 * r + 6 * g + b


def sgr(*codes: int) -> str:
    """Build a Select Graphic Rendition escape from numeric codes."""
    return f"{ESC}[{';'.join(str(c) for c in codes)}m"


def _build_named() -> Mapping[str, tuple[int, ...]]:
    names = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
    table: dict[str, tuple[int, ...]] = {}
    for offset, name in enumerate(names):
        table[name] = (30 + offset,)
        table[BG_PREFIX + name] = (40 + offset,)
        table[f"bright{name}"] = (90 + offset,)
        table[f"{BG_PREFIX}bright{name}"] = (100 + offset,)

    cube = {
        "orange": (5, 2, 0),
        "indigo": (2, 0, 2),
        "violet": (4, 0, 5),
        "gray":   (1, 1, 1),
    }
    for name, rgb in cube.items():
        table[name] = (FG, 5, cube_index(*rgb))
        table[BG_PREFIX + name] = (BG, 5, cube_index(*rgb))
    return MappingProxyType(table)


NAMED_COLORS = _build_named()


def _cube_codes(spec: str) -> Optional[tuple[int, ...]]:
    m = CUBE_RE.match(spec)
    if not m:
        return None
    rgb = tuple(int(m.group(k)) for k in ("r", "g", "b"))
    if any(c > 5 for c in rgb):
        return None
    codes = (BG if m.group("bg") else FG, 5, cube_index(*rgb))
    return (BOLD,) + codes if m.group("bold") else codes


@lru_cache(maxsize=None)
def resolve(spec: Optional[str]) -> Optional[str]:
    """Return the escape sequence for a color spec, or None when it does not resolve."""
    if spec is None:
        return None
    key = spec.strip().lower()

    if key in NAMED_COLORS:
        return sgr(*NAMED_COLORS[key])

    if key.startswith(BOLD_PREFIX) and key[len(BOLD_PREFIX):] in NAMED_COLORS:
        return sgr(BOLD, *NAMED_COLORS[key[len(BOLD_PREFIX):]])

    codes = _cube_codes(key)
    if codes is not None:
        return sgr(*codes)

    logger.debug("Color spec %r did not resolve; rendering unstyled", spec)
    return None


def lookup(table: Mapping[str, str], *keys: str) -> Optional[str]:
    """Return the value of the first key present in table, matching case-insensitively."""
    for key in keys:
        value = table.get(key.lower())
        if value is not None:
            return value
    return None


def resolve_roles(table: Mapping[str, str], *roles: str) -> Optional[str]:
    """Resolve the first role of the fallback chain that the color table defines."""
    return resolve(lookup(table, *roles))


def colorize(text: str, escape: Optional[str]) -> str:
    """Wrap text in escape ... RESET; unchanged when there is no escape."""
    if escape is None:
        return text
    return f"{escape}{text}{RESET}"

"""Unit tests for core/ansi.py"""

import pytest

from mdcolor.core.ansi import (
    NAMED_COLORS,
    RESET,
    colorize,
    cube_index,
    lookup,
    resolve,
    resolve_roles,
    sgr,
)


def test_named_colors():
    """Standard, bright and background names map to their SGR codes."""
    assert resolve("red") == "\x1b[31m"
    assert resolve("brightblue") == "\x1b[94m"
    assert resolve("bg-green") == "\x1b[42m"
    assert resolve("bg-brightwhite") == "\x1b[107m"


def test_extended_names_use_color_cube():
    """orange/indigo/violet/gray are fixed 6x6x6 cube entries."""
    assert resolve("orange") == "\x1b[38;5;208m"
    assert resolve("gray") == "\x1b[38;5;59m"
    assert resolve("bg-violet") == f"\x1b[48;5;{cube_index(4, 0, 5)}m"
    assert resolve("indigo") == f"\x1b[38;5;{cube_index(2, 0, 2)}m"


def test_bold_prepends_modifier():
    """bold-<name> adds SGR 1 in front of the named color codes."""
    assert resolve("bold-red") == "\x1b[1;31m"
    assert resolve("bold-orange") == "\x1b[1;38;5;208m"


def test_bold_unknown_name():
    """bold- with an unknown color name does not resolve."""
    assert resolve("bold-chartreuse") is None


@pytest.mark.parametrize("r,g,b", [(0, 0, 0), (5, 5, 5), (1, 2, 3), (5, 0, 4)])
def test_cube_foreground_index(r, g, b):
    """r,g,b resolves to palette index 16 + 36r + 6g + b in the foreground slot."""
    assert resolve(f"{r},{g},{b}") == f"\x1b[38;5;{16 + 36 * r + 6 * g + b}m"


def test_cube_background():
    """bg-r,g,b uses the background introducer."""
    assert resolve("bg-1,1,1") == "\x1b[48;5;59m"


def test_cube_bold():
    """bold- also applies to cube coordinates."""
    assert resolve("bold-0,0,5") == "\x1b[1;38;5;21m"


@pytest.mark.parametrize("spec", ["6,0,0", "0,0,12", "1,1", "1,1,1,1", "a,b,c", "-1,0,0", "1, 1, 1"])
def test_malformed_cube_specs(spec):
    """Out-of-range components and wrong arity are treated as no match."""
    assert resolve(spec) is None


@pytest.mark.parametrize("spec", ["", "nope", "bg-", "brightorange", None])
def test_unknown_specs(spec):
    """Unrecognized specs resolve to None instead of raising."""
    assert resolve(spec) is None


def test_spec_is_case_and_space_insensitive():
    assert resolve("  Red ") == resolve("red")
    assert resolve("BG-1,2,3") == resolve("bg-1,2,3")


def test_named_table_is_read_only():
    with pytest.raises(TypeError):
        NAMED_COLORS["red"] = (1,)


def test_sgr_joins_codes():
    assert sgr(38, 5, 208) == "\x1b[38;5;208m"
    assert RESET == "\x1b[0m"


def test_lookup_fallback_chain():
    """lookup returns the first role the table defines, case-insensitively."""
    table = {"href": "orange", "text": "white"}
    assert lookup(table, "linkHref", "href") == "orange"
    assert lookup(table, "TEXT") == "white"
    assert lookup(table, "missing", "other") is None


def test_resolve_roles():
    table = {"linkhref": "blue", "href": "orange"}
    assert resolve_roles(table, "linkHref", "href") == "\x1b[34m"
    assert resolve_roles(table, "imageHref", "href") == "\x1b[38;5;208m"
    assert resolve_roles({"code": "nope"}, "code") is None


def test_colorize():
    assert colorize("x", "\x1b[31m") == "\x1b[31mx\x1b[0m"
    assert colorize("x", None) == "x"

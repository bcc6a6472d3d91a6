"""Application configuration: settings schema, mdcolor.yaml loader, color profiles and option tables"""

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)

CONFIG_FILE = "mdcolor.yaml"
PROFILE_DIR = Path(__file__).parent / "profiles"
DEFAULT_PROFILE = "light"
DEFAULT_README_PATTERN = r"(?i)readme(\.(te?xt|md|markdown))?"

ENV_PREFIX = "MD_"
COLOR_ENV_PREFIX = "MD_COL_"
OPTION_ENV_PREFIX = "MD_OPT_"
TABLE_FIELDS = ("colors", "options")
# short names read before MD_<FIELD>, which wins when both are set
ENV_ALIASES: Mapping[str, str] = MappingProxyType({
    "markdown":       "MD_MD",
    "readme_pattern": "MD_README",
})

DEFAULT_COLORS: Mapping[str, str] = MappingProxyType({
    "code":       "red",
    "strong":     "orange",
    "emphasis":   "green",
    "header":     "brightblue",
    "href":       "orange",
    "imagehref":  "blue",
    "title":      "green",
    "blockquote": "gray",
    "imagetext":  "brightblue",
    "linktext":   "brightblue",
    "checked":    "brightgreen",
    "unchecked":  "orange",
})

DEFAULT_OPTIONS: Mapping[str, str] = MappingProxyType({
    "checked_item":   "✓",
    "unchecked_item": "☐",
})


class Settings(BaseModel):
    markdown:       bool = Field(default=False, description="Echo markdown syntax alongside the colors")
    profile:        str  = Field(default=DEFAULT_PROFILE, description="Named color profile")
    html:           bool = Field(default=False, description="Render HTML instead of ANSI text")
    no_readme:      bool = Field(default=False, description="Disable README discovery when no file is given")
    readme_pattern: str  = Field(default=DEFAULT_README_PATTERN, description="README file name regex")
    parser_config:  str  = Field(default="commonmark", description="MarkdownIt parser preset name")
    linkify:        bool = Field(default=True, description="Turn bare URLs into links")
    colors:  dict[str, str] = Field(default_factory=dict, description="Role -> color spec overrides")
    options: dict[str, str] = Field(default_factory=dict, description="Option overrides (e.g. checked_item)")


def _lower_keys(table: Mapping[str, Any]) -> dict[str, str]:
    return {str(k).lower(): str(v) for k, v in table.items()}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdcolor.yaml, then MD_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")
        logger.debug("Loaded %s", CONFIG_FILE)

    for name in Settings.model_fields:
        if name in TABLE_FIELDS:
            continue
        for var in (ENV_ALIASES.get(name), f"{ENV_PREFIX}{name.upper()}"):
            if var and (val := os.getenv(var)):
                data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def list_profiles() -> list[str]:
    """Names of the bundled color profiles."""
    return sorted(p.stem for p in PROFILE_DIR.glob("*.yaml"))


def load_profile(name: str) -> dict[str, str]:
    """Return the role -> color spec table of a bundled profile."""
    path = PROFILE_DIR / f"{name.lower()}.yaml"
    if not path.is_file():
        raise ValueError(f"No color profile found: {name} (available: {', '.join(list_profiles())})")
    try:
        table = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid color profile {name}: {e}") from e
    if not isinstance(table, dict):
        raise ValueError(f"Invalid color profile {name}: expected a mapping, got {type(table).__name__}")
    logger.debug("Loaded color profile %s from %s", name, path)
    return _lower_keys(table)


def _env_table(prefix: str, environ: Optional[Mapping[str, str]]) -> dict[str, str]:
    env = os.environ if environ is None else environ
    return {k[len(prefix):].lower(): v for k, v in env.items() if k.startswith(prefix) and len(k) > len(prefix)}


def build_colors(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Merge defaults < profile < config colors < MD_COL_<ROLE> env vars; keys lower-cased."""
    colors = dict(DEFAULT_COLORS)
    if settings.profile:
        colors.update(load_profile(settings.profile))
    colors.update(_lower_keys(settings.colors))
    colors.update(_env_table(COLOR_ENV_PREFIX, environ))
    return colors


def build_options(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Merge defaults < config options < MD_OPT_<KEY> env vars; keys lower-cased."""
    options = dict(DEFAULT_OPTIONS)
    options.update(_lower_keys(settings.options))
    options.update(_env_table(OPTION_ENV_PREFIX, environ))
    return options

"""README discovery in the working directory"""

from __future__ import annotations
from pathlib import Path
import re

def find_readme(root: Path, pattern: str | re.Pattern) -> Path | None:
    """Return the first file in root (sorted by name) whose whole name matches pattern."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    for p in sorted(root.iterdir()):
        if p.is_file() and regex.fullmatch(p.name):
            return p
    return None

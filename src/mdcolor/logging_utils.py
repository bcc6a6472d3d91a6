"""Logging setup for the CLI entry point"""

import logging
import sys


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send log records to stderr: WARNING by default, DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    fmt = "[%(levelname)s] [%(name)s] %(message)s" if verbose else "%(levelname)s: %(message)s"
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    return root

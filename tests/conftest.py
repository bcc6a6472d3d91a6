"""Root test configuration: keep the caller's MD_* environment out of the tests"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_md_env(monkeypatch):
    """Remove MD_* variables (settings, MD_COL_*, MD_OPT_*) for every test."""
    for name in list(os.environ):
        if name.startswith("MD_"):
            monkeypatch.delenv(name)

"""Root test configuration: keep the caller's MDPROSE_* environment out of tests"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDPROSE_<FIELD> variables so load_config sees only what a test sets."""
    for name in list(os.environ):
        if name.startswith("MDPROSE_"):
            monkeypatch.delenv(name)

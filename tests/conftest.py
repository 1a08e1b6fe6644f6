"""Root test configuration: isolate each test from local config and environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run from an empty tmp directory with no PAIRDIFF_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("PAIRDIFF_"):
            monkeypatch.delenv(name)

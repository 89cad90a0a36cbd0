# tests/conftest.py
"""
Shared fixtures: every test starts from code-default configuration, with
HOME pointed at an empty temporary directory.
"""

import pytest

from failchain.config import set_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    set_config(None)
    yield
    set_config(None)

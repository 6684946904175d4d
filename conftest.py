"""Shared fixtures for sqlescape tests."""

import pytest
from sqlescape.lib.parser.handlers import PassthruEscapeHandler


@pytest.fixture
def handler_map():
    return {"limit": PassthruEscapeHandler(True)}


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch, tmp_path):
    """Keep user configuration out of the tests."""
    from sqlescape.config import settings

    monkeypatch.setattr(settings.appsettings, "handlersFile", tmp_path / "absent.json")
    monkeypatch.setattr(settings.appsettings, "detailedOutput", False)

"""
Environment overrides in backend.config.
"""

import importlib

import pytest

from backend import config
from backend.engine.errors import InvalidConfiguration


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under a patched environment, then restore the defaults."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_best_of_override(monkeypatch, reload_config):
    monkeypatch.setenv("RPS_BEST_OF", "7")
    assert reload_config().DEFAULT_BEST_OF == 7


@pytest.mark.parametrize("value", ["five", "4", "0", "-3", ""])
def test_invalid_best_of_override_fails_at_import(monkeypatch, reload_config, value):
    monkeypatch.setenv("RPS_BEST_OF", value)
    with pytest.raises(InvalidConfiguration, match="RPS_BEST_OF"):
        reload_config()


def test_cors_origins_override(monkeypatch, reload_config):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, ,http://b.test")
    assert reload_config().CORS_ORIGINS == ["http://a.test", "http://b.test"]

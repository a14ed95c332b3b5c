"""
Tests for the application entry point and configuration.
"""

import importlib
from unittest.mock import Mock

import pytest

import api_server
from Main import main as entry
from Settings import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload Settings.config under a patched environment, then restore it"""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_main_starts_server(monkeypatch):
    start_server = Mock()
    monkeypatch.setattr(entry, "start_server", start_server)

    entry.main()

    start_server.assert_called_once_with()


def test_start_server_passes_settings_to_uvicorn(monkeypatch):
    run = Mock()
    monkeypatch.setattr(api_server.uvicorn, "run", run)

    api_server.start_server()

    run.assert_called_once_with(
        api_server.app,
        host=api_server.API_HOST,
        port=api_server.API_PORT,
        log_level=api_server.LOG_LEVEL.lower()
    )


class TestSettings:
    def test_default_settings(self):
        assert config.PASSWORD_MIN_LENGTH == 6
        assert isinstance(config.API_PORT, int)
        assert config.LOG_LEVEL in config.LOG_LEVELS

    def test_port_from_environment(self, monkeypatch, reload_config):
        monkeypatch.setenv("API_PORT", "9001")
        assert reload_config().API_PORT == 9001

    def test_non_integer_port_is_rejected(self, monkeypatch, reload_config):
        monkeypatch.setenv("API_PORT", "abc")
        with pytest.raises(RuntimeError, match="API_PORT must be an integer") as excinfo:
            reload_config()
        assert excinfo.value.__cause__ is None
        assert excinfo.value.__suppress_context__ is True

    @pytest.mark.parametrize("value,expected", [
        ("debug", "DEBUG"),
        ("warn", "WARNING"),
        ("WARNING", "WARNING"),
        ("Error", "ERROR"),
    ])
    def test_log_level_is_normalised(self, monkeypatch, reload_config, value, expected):
        monkeypatch.setenv("LOG_LEVEL", value)
        assert reload_config().LOG_LEVEL == expected

    def test_unknown_log_level_is_rejected(self, monkeypatch, reload_config):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(RuntimeError, match="LOG_LEVEL must be one of"):
            reload_config()

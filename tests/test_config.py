"""Unit tests for environment-driven CLI defaults."""

import importlib

import pytest

import highlight_captions.config as config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key in ("CAPTIONS_DEFAULT_PRESET", "CAPTIONS_DEFAULT_WIDTH",
                    "CAPTIONS_DEFAULT_HEIGHT", "CAPTIONS_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:

    def test_environment_overrides(self, reload_config):
        cfg = reload_config(
            CAPTIONS_DEFAULT_PRESET="boxed",
            CAPTIONS_DEFAULT_WIDTH="1920",
            CAPTIONS_DEFAULT_HEIGHT="1080",
            CAPTIONS_LOG_LEVEL="debug",
        )
        assert cfg.DEFAULT_PRESET == "boxed"
        assert (cfg.DEFAULT_WIDTH, cfg.DEFAULT_HEIGHT) == (1920, 1080)
        assert cfg.LOG_LEVEL == "DEBUG"

    def test_defaults_are_reference_frame(self, reload_config, tmp_path, monkeypatch):
        # keep a developer's .env out of the way
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: False)
        cfg = reload_config()
        assert (cfg.DEFAULT_WIDTH, cfg.DEFAULT_HEIGHT) == (1080, 1920)
        assert cfg.DEFAULT_PRESET == "classic"
        assert cfg.LOG_LEVEL == "WARNING"

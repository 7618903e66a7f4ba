"""Tests for environment settings and the i18n helper."""

import logging
from pathlib import Path

from dotenv import dotenv_values

from happinessstory.config import load_settings
from happinessstory.i18n import t
from happinessstory.logging import LOG_FORMAT, configure_logging


class TestLoadSettings:
    def test_defaults(self, monkeypatch):
        for var in ("HAPPINESS_DATA_PATH", "HAPPINESS_LANG", "HAPPINESS_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        settings = load_settings()
        assert settings.data_path.parts[-2:] == ("data", "2019.csv")
        assert settings.data_path.is_absolute()
        assert settings.lang is None
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HAPPINESS_DATA_PATH", str(tmp_path / "r.csv"))
        monkeypatch.setenv("HAPPINESS_LANG", "ko")
        monkeypatch.setenv("HAPPINESS_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.data_path == Path(tmp_path / "r.csv")
        assert settings.lang == "ko"
        assert settings.log_level == "debug"

    def test_unsupported_lang_falls_back(self, monkeypatch):
        monkeypatch.setenv("HAPPINESS_LANG", "fr")
        assert load_settings().lang == "en"


class TestTranslate:
    def test_known_key(self):
        assert t("btn_next", "en") == "Next →"
        assert t("btn_next", "ko") == "다음 →"

    def test_unknown_key_returns_key(self):
        assert t("no_such_key", "en") == "no_such_key"


def test_configure_logging_uppercases_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging("debug")
    assert calls == [{"level": "DEBUG", "format": LOG_FORMAT}]


def test_env_example_documents_default_data_path(monkeypatch):
    example = Path(__file__).parent.parent / ".env.example"
    values = dotenv_values(example)
    monkeypatch.delenv("HAPPINESS_DATA_PATH", raising=False)
    default = load_settings().data_path
    monkeypatch.setenv("HAPPINESS_DATA_PATH", values["HAPPINESS_DATA_PATH"])
    assert load_settings().data_path == default
    assert (default.parent / "README.md").is_file()

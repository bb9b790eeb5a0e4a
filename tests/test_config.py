"""Tests for the configuration layer."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone, tzinfo
from pathlib import Path

import pytest

from core.config import AppSettings, get_user_config_dir, resolve_timezone


def test_defaults(settings: AppSettings) -> None:
    assert settings.timezone == "UTC"
    assert settings.templates_dir is None
    assert settings.autoescape_extensions == ["html", "xml"]
    assert settings.log_level == "WARNING"
    assert settings.resolved_timezone() is timezone.utc


def test_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """TMPL_FUNCS_* variables override the defaults."""
    monkeypatch.setenv("TMPL_FUNCS_TIMEZONE", "Etc/GMT-2")
    monkeypatch.setenv("TMPL_FUNCS_TEMPLATES_DIR", str(tmp_path))
    monkeypatch.setenv("TMPL_FUNCS_AUTOESCAPE_EXTENSIONS", '["html", "j2"]')
    settings = AppSettings(_env_file=None)
    assert settings.templates_dir == tmp_path
    assert settings.autoescape_extensions == ["html", "j2"]
    tz = settings.resolved_timezone()
    assert datetime.now(tz).utcoffset() == timedelta(hours=2)


def test_dotenv_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("TMPL_FUNCS_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    assert AppSettings(_env_file=env_file).log_level == "DEBUG"


@pytest.mark.parametrize("name", ["UTC", "utc", " Z "])
def test_resolve_utc(name: str) -> None:
    assert resolve_timezone(name) is timezone.utc


def test_resolve_local() -> None:
    assert isinstance(resolve_timezone("local"), tzinfo)


@pytest.mark.parametrize("name", ["Not/AZone", "../etc/passwd", ""])
def test_resolve_unknown(name: str) -> None:
    with pytest.raises(ValueError, match="unknown timezone"):
        resolve_timezone(name)


def test_user_config_dir_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setattr(sys, "platform", "linux")
    assert get_user_config_dir() == tmp_path / "tmpl-funcs"


def test_user_config_dir_darwin(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(sys, "platform", "darwin")
    assert get_user_config_dir() == tmp_path / "Library" / "Application Support" / "tmpl-funcs"

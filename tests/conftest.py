"""Pytest definitions shared by all tests."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterator

import pytest
from jinja2 import Environment

from adapters.jinja_env import build_environment
from core.config import AppSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Run every test in an empty dir without TMPL_FUNCS_* variables."""
    for key in list(os.environ):
        if key.upper().startswith("TMPL_FUNCS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def settings() -> AppSettings:
    """Settings that ignore any .env file on the machine."""
    return AppSettings(_env_file=None)


@pytest.fixture
def env(settings: AppSettings) -> Environment:
    """A Jinja2 environment with the template functions registered."""
    return build_environment(settings)


@pytest.fixture
def reference_moment() -> datetime:
    """Mon Jan 2 15:04:05.123456 MST 2006."""
    mst = timezone(timedelta(hours=-7), "MST")
    return datetime(2006, 1, 2, 15, 4, 5, 123456, tzinfo=mst)

"""Shared fixtures for resolve_path tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from resolve_path import PathResolver, StaticEnvironment
from resolve_path.config.settings import Settings, reset_settings

HOME = "/home/user"
CWD = "/home/user/Documents"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep RESOLVE_PATH_* variables and stray .env files out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("RESOLVE_PATH_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def environment() -> StaticEnvironment:
    return StaticEnvironment(home=HOME, cwd=CWD)


@pytest.fixture
def resolver(environment: StaticEnvironment) -> PathResolver:
    return PathResolver(environment=environment, settings=Settings())

"""Shared pytest fixtures for affixtrim tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from affixtrim.config.settings import AffixSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no AFFIXTRIM_* env vars.

    Keeps a developer's own ``affixtrim.toml`` or environment from leaking
    into config discovery.
    """
    for name in [n for n in os.environ if n.startswith("AFFIXTRIM_")]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("affixtrim")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def settings(tmp_path: Path) -> AffixSettings:
    """Default text-mode settings with no config file."""
    return AffixSettings.from_cli(start=tmp_path)


@pytest.fixture
def binary_settings(tmp_path: Path) -> AffixSettings:
    """Binary-mode settings using the default utf-8 codec."""
    return AffixSettings.from_cli(start=tmp_path, binary=True)


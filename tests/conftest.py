"""Shared pytest fixtures and test helpers for vaultpush tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from vaultpush.config.settings import PushSettings
from vaultpush.infrastructure.vault import Vault


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VAULTPUSH_* and color-forcing env vars out of the tests."""
    monkeypatch.delenv("VAULTPUSH_CONFIG", raising=False)
    monkeypatch.delenv("VAULTPUSH_VAULT_LOCATION", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def vault_root(tmp_path: Path) -> Path:
    """Temporary vault directory with a small folder to push.

    Layout::

        vault/
          blog/
            index.md
            posts/hello.md
            posts/img/logo.png
    """
    root = tmp_path / "vault"
    posts = root / "blog" / "posts"
    (posts / "img").mkdir(parents=True)
    (root / "blog" / "index.md").write_text("# Index\n", encoding="utf-8")
    (posts / "hello.md").write_text("Hello, world\n", encoding="utf-8")
    (posts / "img" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01")
    return root


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """A destination path that does not exist yet."""
    return tmp_path / "site" / "content"


@pytest.fixture
def vault(vault_root: Path) -> Vault:
    """Vault backed by the temp vault directory."""
    settings = PushSettings.from_cli(vault_location=vault_root)
    return Vault(settings)


@pytest.fixture
def _isolated_vault(vault_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp vault root so the CLI picks it up.

    Use via ``@pytest.mark.usefixtures("_isolated_vault")`` on command test
    classes.
    """
    monkeypatch.chdir(vault_root)


def _snapshot(root: Path) -> dict[str, bytes | None]:
    result: dict[str, bytes | None] = {}
    for path in root.rglob("*"):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_bytes()
    return result


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes | None]]:
    """Map every entry under a root to its bytes (None for directories)."""
    return _snapshot

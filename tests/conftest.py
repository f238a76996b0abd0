from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:  # pyright: ignore[reportUnusedFunction]
    monkeypatch.delenv("OBSIDIAN_VAULT_PATH", raising=False)
    monkeypatch.delenv("GETNOTES_IMPORT_FOLDER", raising=False)


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    def _make(entries: dict[str, str], name: str = "export.zip") -> Path:
        archive_path = tmp_path / name
        with zipfile.ZipFile(archive_path, "w") as zf:
            for entry_name, content in entries.items():
                zf.writestr(entry_name, content)
        return archive_path

    return _make


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    path = tmp_path / "vault"
    path.mkdir()
    return path

"""Configuration loading, validation and persisted settings."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

DEFAULT_IMPORT_FOLDER = "get-notes"
SETTINGS_FILENAME = ".getnotes2vault.json"


@dataclass
class Config:
    """Application configuration."""

    vault_path: Path = field(default_factory=Path.cwd)
    import_folder: str = DEFAULT_IMPORT_FOLDER
    verbose: bool = False

    @property
    def output_dir(self) -> Path:
        return self.vault_path / self.import_folder

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.import_folder.strip():
            raise ConfigError("Import folder cannot be empty.")
        folder = PurePath(self.import_folder)
        if folder.is_absolute():
            raise ConfigError(
                f"Import folder must be relative to the vault: {self.import_folder}"
            )
        if ".." in folder.parts:
            raise ConfigError(
                f"Import folder cannot leave the vault: {self.import_folder}"
            )
        if self.vault_path.exists() and not self.vault_path.is_dir():
            raise ConfigError(f"Vault path is not a directory: {self.vault_path}")


class SettingsStore:
    """JSON settings persisted inside the vault."""

    def __init__(self, vault_path: Path):
        self.path = Path(vault_path) / SETTINGS_FILENAME

    def load(self) -> dict:
        """Return saved settings; unreadable or corrupt files count as empty."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, settings: dict) -> None:
        merged = {**self.load(), **settings}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(merged, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
        )


def load_config(
    vault_path: Optional[str] = None,
    import_folder: Optional[str] = None,
    verbose: bool = False,
) -> Config:
    """Load config from .env and saved settings, then apply CLI overrides."""
    load_dotenv()

    resolved_vault = Path(vault_path or os.getenv("OBSIDIAN_VAULT_PATH") or Path.cwd())
    saved_folder = SettingsStore(resolved_vault).load().get("import_folder")
    if not isinstance(saved_folder, str):
        saved_folder = None

    config = Config(
        vault_path=resolved_vault,
        import_folder=(
            import_folder
            or os.getenv("GETNOTES_IMPORT_FOLDER")
            or saved_folder
            or DEFAULT_IMPORT_FOLDER
        ),
        verbose=verbose,
    )

    config.validate()
    return config

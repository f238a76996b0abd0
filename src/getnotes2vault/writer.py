"""Write converted notes to the vault filesystem."""

from pathlib import Path

from .exceptions import WriteError


class VaultWriter:
    """Writes Markdown files into folders under a vault root."""

    def __init__(self, vault_path: Path):
        self.vault_path = Path(vault_path)

    def ensure_folder(self, folder: str) -> Path:
        """Create the folder inside the vault if it does not exist yet."""
        output_dir = self.vault_path / folder
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(f"Could not create folder {output_dir}: {e}") from e
        return output_dir

    def write(self, folder: str, filename: str, content: str) -> Path:
        """Write a note, replacing any existing file with the same name."""
        filepath = self.vault_path / folder / filename
        try:
            filepath.write_text(content, encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Could not write {filepath}: {e}") from e
        return filepath

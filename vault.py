"""Central Vault class for path lookup, note I/O and plugin data."""

import json
from pathlib import Path
from typing import Iterator

PLUGIN_ID = "daily-notes"


class Vault:
    """Represents an Obsidian vault on disk."""

    EXCLUDED_DIRS = {".obsidian", ".trash", ".git", ".venv", "node_modules"}

    def __init__(self, vault_path: str | Path):
        self.root = Path(vault_path).expanduser().resolve()
        if not self.root.is_dir():
            raise ValueError(f"Vault path does not exist: {self.root}")

    def lookup(self, path: str) -> Path | None:
        """Return the file at an exact vault-relative path, or None.

        Unlike Obsidian's link resolution there is no fuzzy matching here:
        "Daily Notes/07032024-daily.md" only ever means that one file.
        """
        path = path.strip("/")
        if not path:
            return None
        candidate = self.root / path
        if candidate.is_file() and self._is_within_vault(candidate):
            return candidate
        return None

    def read_text(self, file: Path) -> str:
        return file.read_text(encoding="utf-8")

    def write_new(self, path: str, content: str) -> Path:
        """Create a new file at a vault-relative path, creating parent dirs.

        Raises FileExistsError if something is already there, ValueError if
        the path escapes the vault.
        """
        path = path.strip("/")
        full = self.root / path
        if not path or not self._is_within_vault(full):
            raise ValueError(f"Path escapes vault: {path}")
        if full.exists():
            raise FileExistsError(f"File already exists: {path}")
        full.parent.mkdir(parents=True, exist_ok=True)
        with full.open("x", encoding="utf-8") as fh:
            fh.write(content)
        return full

    def overwrite(self, file: Path, content: str) -> None:
        file.write_text(content, encoding="utf-8")

    def relative(self, file: Path) -> str:
        """Vault-relative path with forward slashes."""
        return file.relative_to(self.root).as_posix()

    def _is_within_vault(self, path: Path) -> bool:
        """Check that a path resolves to within the vault root."""
        try:
            resolved = path.resolve()
            return resolved == self.root or self.root in resolved.parents
        except (OSError, ValueError):
            return False

    # --- Plugin data ---

    @property
    def plugin_data_path(self) -> Path:
        return self.root / ".obsidian" / "plugins" / PLUGIN_ID / "data.json"

    def read_plugin_data(self) -> dict:
        """Read the plugin's data.json. Returns {} if missing or unreadable."""
        path = self.plugin_data_path
        if not path.is_file():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            return {}
        return data if isinstance(data, dict) else {}

    def write_plugin_data(self, data: dict) -> None:
        path = self.plugin_data_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    # --- Listings for the folder and template pickers ---

    def iter_folders(self) -> Iterator[Path]:
        """Yield every folder in the vault (excluding hidden/excluded)."""
        for p in sorted(self.root.rglob("*")):
            if p.is_dir() and self._should_include(p):
                yield p

    def iter_notes(self) -> Iterator[Path]:
        """Yield every .md file in the vault."""
        for p in sorted(self.root.rglob("*.md")):
            if p.is_file() and self._should_include(p):
                yield p

    def find_folders(self, query: str = "") -> list[str]:
        """Vault-relative folder paths containing query (case-insensitive)."""
        query = query.lower()
        paths = [self.relative(p) for p in self.iter_folders()]
        return [p for p in paths if query in p.lower()]

    def find_notes(self, query: str = "") -> list[str]:
        """Vault-relative markdown paths containing query (case-insensitive)."""
        query = query.lower()
        paths = [self.relative(p) for p in self.iter_notes()]
        return [p for p in paths if query in p.lower()]

    def _should_include(self, path: Path) -> bool:
        """Check if a path should be included (not in excluded dirs)."""
        parts = path.relative_to(self.root).parts
        return not any(part in self.EXCLUDED_DIRS for part in parts)

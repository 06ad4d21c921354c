"""Path utilities for locating the Atuin database and normalizing directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ATUIN_DIR = "atuin"
HISTORY_DB = "history.db"


class HomeDirectoryError(RuntimeError):
    """Raised when a path needs the home directory and none is known."""

    def __init__(self) -> None:
        super().__init__("Cannot determine home directory")


@dataclass(frozen=True)
class Config:
    """Environment-derived settings, resolved once at startup."""

    home: Optional[str] = None
    db_override: Optional[str] = None
    xdg_data_home: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Read HOME/USERPROFILE, ATUIN_DB_PATH and XDG_DATA_HOME."""
        env = os.environ if environ is None else environ
        return cls(
            home=env.get("HOME") or env.get("USERPROFILE") or None,
            db_override=env.get("ATUIN_DB_PATH") or None,
            xdg_data_home=env.get("XDG_DATA_HOME") or None,
        )

    def require_home(self) -> str:
        if not self.home:
            raise HomeDirectoryError()
        return self.home

    def default_db_path(self) -> Path:
        """Return <XDG_DATA_HOME or ~/.local/share>/atuin/history.db."""
        if self.xdg_data_home:
            data_dir = Path(self.xdg_data_home)
        else:
            data_dir = Path(self.require_home()) / ".local" / "share"
        return data_dir / ATUIN_DIR / HISTORY_DB

    def db_path(self, cli_override: Optional[str] = None) -> Path:
        """Pick the database path: --db, then ATUIN_DB_PATH, then the XDG default."""
        if cli_override:
            return Path(normalize_path(cli_override, self))
        if self.db_override:
            return Path(self.db_override)
        return self.default_db_path()


def normalize_path(path: str, config: Config) -> str:
    """Expand a leading '~' to the configured home and return an absolute path.

    '..', '.', repeated and trailing separators are collapsed. Symlinks are
    left alone since history records store the logical working directory.
    """
    if path == "~" or path.startswith("~/"):
        path = config.require_home() + path[1:]
    return os.path.abspath(path)

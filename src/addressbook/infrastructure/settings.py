"""Settings from environment variables, with .env loaded from the repo root or current dir."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from addressbook.infrastructure.storage import DEFAULT_STORAGE_FILEPATH

# From src/addressbook/infrastructure/settings.py up to the repo root.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent

ENV_STORAGE_FILE = "ADDRESSBOOK_FILE"
ENV_LOG_LEVEL = "ADDRESSBOOK_LOG_LEVEL"


def load_env_file() -> Path | None:
    """Load the first .env found (repo root, then cwd). Existing variables win."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


@dataclass(frozen=True)
class Settings:
    storage_file: Path = Path(DEFAULT_STORAGE_FILEPATH)
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        storage_file = env.get(ENV_STORAGE_FILE, "").strip() or DEFAULT_STORAGE_FILEPATH
        level_name = env.get(ENV_LOG_LEVEL, "").strip().upper() or "INFO"
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"{ENV_LOG_LEVEL} must be a logging level name, got {level_name!r}")
        return cls(storage_file=Path(storage_file), log_level=level)

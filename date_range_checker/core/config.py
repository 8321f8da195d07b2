from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "DRC_"


@dataclass
class Settings:
    directory: str | None
    extension: str | None
    log_level: str | None


def _read_env_file(path: Path | None = None) -> dict[str, str]:
    """Return the DRC_* assignments of a .env file in the working directory."""
    env_path = path or Path.cwd() / ".env"
    if not env_path.is_file():
        return {}
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        # An unreadable .env must not break CLI usage
        return {}

    env: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key.startswith(ENV_PREFIX):
            continue
        env[key] = value.strip().strip("\"'")
    return env


def get_settings() -> Settings:
    """Resolve settings; process environment wins over .env."""
    env = {**_read_env_file(), **{k: v for k, v in os.environ.items() if v}}
    return Settings(
        directory=env.get(f"{ENV_PREFIX}DIRECTORY"),
        extension=env.get(f"{ENV_PREFIX}EXTENSION"),
        log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL"),
    )

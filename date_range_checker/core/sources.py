from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

SOURCES_PATH = Path("configs/sources.yaml")


@dataclass(frozen=True)
class Source:
    id: str
    directory: str
    extension: str = ""


def _load_yaml(path: Path | None = None) -> dict:
    cfg_path = path or SOURCES_PATH
    if not cfg_path.exists():
        return {}
    with cfg_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def list_sources(path: Path | None = None) -> list[str]:
    data = _load_yaml(path)
    return sorted(data.get("sources", {}) or {})


def get_source(source_id: str, path: Path | None = None) -> Source | None:
    data = _load_yaml(path)
    sources = data.get("sources", {}) or {}
    cfg = sources.get(source_id)
    if not cfg or not cfg.get("directory"):
        return None
    return Source(
        id=source_id,
        directory=str(cfg["directory"]),
        extension=str(cfg.get("extension") or ""),
    )

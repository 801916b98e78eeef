"""Runtime settings read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_BUILDER_API_URL = "https://builder-api.decentraland.org/v1"
DEFAULT_BUILDER_API_TIMEOUT = 10.0
DEFAULT_SNAPSHOT_PATH = Path("SceneStateTranslator/state.json")


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass
class Settings:
    builder_api_url: str
    builder_api_timeout: float
    snapshot_path: Path


def get_settings() -> Settings:
    timeout_raw = _get_env("BUILDER_API_TIMEOUT")
    if timeout_raw is None:
        timeout = DEFAULT_BUILDER_API_TIMEOUT
    else:
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError(f"BUILDER_API_TIMEOUT must be a number of seconds, got {timeout_raw!r}") from exc
        if timeout <= 0:
            raise ValueError(f"BUILDER_API_TIMEOUT must be positive, got {timeout_raw!r}")

    snapshot_path = _get_env("SCENE_SNAPSHOT_PATH")
    return Settings(
        builder_api_url=(_get_env("BUILDER_API_URL") or DEFAULT_BUILDER_API_URL).rstrip("/"),
        builder_api_timeout=timeout,
        snapshot_path=Path(snapshot_path) if snapshot_path else DEFAULT_SNAPSHOT_PATH,
    )

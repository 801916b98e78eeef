"""Persistence helpers for storable scene snapshots."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .config import get_settings
from .schemas import StorableSceneState
from .storable import UnsupportedSchemaVersionError, is_supported_schema_version

logger = logging.getLogger(__name__)


def load_snapshot(path: Optional[Path] = None) -> StorableSceneState:
    """Load the persisted snapshot from disk."""

    path = path or get_settings().snapshot_path
    if not path.exists():
        return StorableSceneState()

    try:
        raw: Any
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable scene snapshot %s: %s", path, exc)
        return StorableSceneState()

    try:
        snapshot = StorableSceneState.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Ignoring malformed scene snapshot %s: %s", path, exc)
        return StorableSceneState()

    if not is_supported_schema_version(snapshot):
        raise UnsupportedSchemaVersionError(
            f"Scene snapshot {path} has unsupported schemaVersion {snapshot.schema_version}"
        )
    return snapshot


def save_snapshot(snapshot: StorableSceneState, path: Optional[Path] = None) -> None:
    """Persist the provided snapshot to disk."""

    path = path or get_settings().snapshot_path
    path.parent.mkdir(parents=True, exist_ok=True)
    serialised = json.dumps(snapshot.model_dump(mode="json", by_alias=True), indent=2, sort_keys=True)
    path.write_text(serialised, encoding="utf-8")

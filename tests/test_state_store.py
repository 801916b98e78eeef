import json
import logging

import pytest

from SceneStateTranslator.schemas import StorableComponent, StorableEntity, StorableSceneState
from SceneStateTranslator.state_store import load_snapshot, save_snapshot
from SceneStateTranslator.storable import UnsupportedSchemaVersionError


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "state.json"
    snapshot = StorableSceneState(
        entities=[StorableEntity(id="e1", components=[StorableComponent(type="Name", value={"value": "e1"})])]
    )

    save_snapshot(snapshot, path)

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk["schemaVersion"] == 1
    assert on_disk["entities"][0]["components"][0] == {"type": "Name", "value": {"value": "e1"}}
    assert load_snapshot(path) == snapshot


def test_missing_file_loads_empty_snapshot(tmp_path):
    snapshot = load_snapshot(tmp_path / "absent.json")

    assert snapshot.entities == []
    assert snapshot.schema_version == 1


def test_unreadable_file_loads_empty_snapshot(tmp_path, caplog):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        snapshot = load_snapshot(path)

    assert snapshot.entities == []
    assert "unreadable" in caplog.text


def test_malformed_snapshot_loads_empty_snapshot(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"schemaVersion": 1, "entities": [{"components": []}]}), encoding="utf-8")

    assert load_snapshot(path).entities == []


def test_unsupported_version_is_surfaced(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"schemaVersion": 7, "entities": []}), encoding="utf-8")

    with pytest.raises(UnsupportedSchemaVersionError):
        load_snapshot(path)


def test_default_path_comes_from_settings(tmp_path, monkeypatch):
    path = tmp_path / "configured.json"
    monkeypatch.setenv("SCENE_SNAPSHOT_PATH", str(path))

    save_snapshot(StorableSceneState())

    assert path.exists()
    assert load_snapshot() == StorableSceneState()

from pathlib import Path

import pytest

from SceneStateTranslator.config import (
    DEFAULT_BUILDER_API_TIMEOUT,
    DEFAULT_BUILDER_API_URL,
    DEFAULT_SNAPSHOT_PATH,
    get_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BUILDER_API_URL", "BUILDER_API_TIMEOUT", "SCENE_SNAPSHOT_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()

    assert settings.builder_api_url == DEFAULT_BUILDER_API_URL
    assert settings.builder_api_timeout == DEFAULT_BUILDER_API_TIMEOUT
    assert settings.snapshot_path == DEFAULT_SNAPSHOT_PATH


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BUILDER_API_URL", "http://localhost:5000/v1/")
    monkeypatch.setenv("BUILDER_API_TIMEOUT", "2.5")
    monkeypatch.setenv("SCENE_SNAPSHOT_PATH", "/tmp/scene.json")

    settings = get_settings()

    assert settings.builder_api_url == "http://localhost:5000/v1"
    assert settings.builder_api_timeout == 2.5
    assert settings.snapshot_path == Path("/tmp/scene.json")


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("BUILDER_API_URL", "  ")

    assert get_settings().builder_api_url == DEFAULT_BUILDER_API_URL


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_invalid_timeout_is_rejected(monkeypatch, value):
    monkeypatch.setenv("BUILDER_API_TIMEOUT", value)

    with pytest.raises(ValueError):
        get_settings()

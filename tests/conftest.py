from __future__ import annotations

import pytest

from SceneStateTranslator.asset_catalog import InMemoryAssetCatalog
from SceneStateTranslator.schemas import BuilderManifest, BuilderScene


@pytest.fixture
def catalog() -> InMemoryAssetCatalog:
    return InMemoryAssetCatalog(
        {
            "tree-a": {"id": "tree-a", "name": "Tree", "category": "nature"},
            "tree-b": {"id": "tree-b", "name": "Tree", "category": "nature"},
            "bench": {"id": "bench", "name": "Park Bench", "category": "decorations"},
            "grass": {"id": "grass", "name": "Grass Floor", "category": "ground"},
        }
    )


@pytest.fixture
def manifest() -> BuilderManifest:
    return BuilderManifest(
        version=10,
        project={"id": "project-1", "title": "Park"},
        scene=BuilderScene(
            id="scene-1",
            metrics={"entities": 0, "triangles": 0},
            limits={"entities": 200, "triangles": 10000},
        ),
    )

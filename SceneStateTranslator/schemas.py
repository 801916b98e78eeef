"""Data models for the internal scene graph, the builder manifest and the storable snapshot."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Component(BaseModel):
    """Component of the internal scene graph: a class id plus its payload."""

    code: int
    data: Any = Field(default_factory=dict)


class SerializedComponent(BaseModel):
    """Component as it travels on the internal wire."""

    type: int
    value: Any = None


class SerializedEntity(BaseModel):
    id: str
    components: List[SerializedComponent] = Field(default_factory=list)


class SerializedSceneState(BaseModel):
    """Flat wire shape of the internal scene graph."""

    entities: List[SerializedEntity] = Field(default_factory=list)


class StorableComponent(BaseModel):
    type: str
    value: Any = None


class StorableEntity(BaseModel):
    id: str
    components: List[StorableComponent] = Field(default_factory=list)


class StorableSceneState(BaseModel):
    """Versioned snapshot used to persist a scene outside the runtime."""

    schema_version: int = Field(default=1, alias="schemaVersion")
    entities: List[StorableEntity] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class BuilderComponent(BaseModel):
    """Component instance inside the builder manifest."""

    id: str
    type: str
    data: Dict[str, Any] = Field(default_factory=dict)


class BuilderEntity(BaseModel):
    """Entity record of the builder manifest."""

    id: str
    name: str
    components: List[str] = Field(default_factory=list)
    disable_gizmos: bool = Field(default=False, alias="disableGizmos")

    model_config = ConfigDict(populate_by_name=True)


class BuilderAsset(BaseModel):
    """Catalog metadata of an asset; unknown catalog fields are kept as they come."""

    id: Optional[str] = None
    name: str = ""
    category: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class BuilderGround(BaseModel):
    """Pointer to the floor asset and the component that places it."""

    asset_id: Optional[str] = Field(default=None, alias="assetId")
    component_id: Optional[str] = Field(default=None, alias="componentId")

    model_config = ConfigDict(populate_by_name=True)


class BuilderScene(BaseModel):
    """Scene section of the builder manifest."""

    id: str
    entities: Dict[str, BuilderEntity] = Field(default_factory=dict)
    components: Dict[str, BuilderComponent] = Field(default_factory=dict)
    assets: Dict[str, BuilderAsset] = Field(default_factory=dict)
    metrics: Dict[str, Any] = Field(default_factory=dict)
    limits: Dict[str, Any] = Field(default_factory=dict)
    ground: Optional[BuilderGround] = None

    @field_validator("assets", mode="before")
    @classmethod
    def _drop_empty_assets(cls, value: Any) -> Any:
        # The builder stores deleted assets as nulls.
        if isinstance(value, dict):
            return {key: asset for key, asset in value.items() if asset is not None}
        return value


class BuilderManifest(BaseModel):
    """Top-level document exchanged with the builder."""

    version: int = 10
    project: Dict[str, Any] = Field(default_factory=dict)
    scene: BuilderScene

    model_config = ConfigDict(extra="allow")

"""Helpers for translating scene state between the runtime, the builder and storage."""
from .asset_catalog import AssetCatalog, BuilderApiAssetCatalog, InMemoryAssetCatalog
from .builder_translation import (
    TranslationDiagnostics,
    detect_ground,
    from_builder_to_state_definition,
    from_builder_to_state_definition_with_diagnostics,
    reconcile_assets,
    to_builder_from_state_definition,
)
from .scene_state import SceneStateDefinition, deserialize_scene_state, serialize_scene_state
from .schemas import (
    BuilderAsset,
    BuilderComponent,
    BuilderEntity,
    BuilderGround,
    BuilderManifest,
    BuilderScene,
    Component,
    SerializedSceneState,
    StorableSceneState,
)
from .state_store import load_snapshot, save_snapshot
from .storable import (
    CURRENT_SCHEMA_VERSION,
    UnsupportedSchemaVersionError,
    from_serialized_state_to_storable_format,
    from_storable_format_to_serialized_state,
    is_supported_schema_version,
)
from .transformer import ComponentTransformer, PassthroughTransformer
from .type_codes import DEFAULT_BRIDGE, TypeCodeBridge, UnknownComponentTypeError

__all__ = [
    "AssetCatalog",
    "BuilderApiAssetCatalog",
    "BuilderAsset",
    "BuilderComponent",
    "BuilderEntity",
    "BuilderGround",
    "BuilderManifest",
    "BuilderScene",
    "CURRENT_SCHEMA_VERSION",
    "Component",
    "ComponentTransformer",
    "DEFAULT_BRIDGE",
    "InMemoryAssetCatalog",
    "PassthroughTransformer",
    "SceneStateDefinition",
    "SerializedSceneState",
    "StorableSceneState",
    "TranslationDiagnostics",
    "TypeCodeBridge",
    "UnknownComponentTypeError",
    "UnsupportedSchemaVersionError",
    "detect_ground",
    "deserialize_scene_state",
    "from_builder_to_state_definition",
    "from_builder_to_state_definition_with_diagnostics",
    "from_serialized_state_to_storable_format",
    "from_storable_format_to_serialized_state",
    "is_supported_schema_version",
    "load_snapshot",
    "reconcile_assets",
    "save_snapshot",
    "serialize_scene_state",
    "to_builder_from_state_definition",
]

"""Conversion between the internal wire shape and the versioned storable snapshot."""
from __future__ import annotations

from .schemas import (
    SerializedComponent,
    SerializedEntity,
    SerializedSceneState,
    StorableComponent,
    StorableEntity,
    StorableSceneState,
)
from .type_codes import DEFAULT_BRIDGE, TypeCodeBridge

CURRENT_SCHEMA_VERSION = 1
SUPPORTED_SCHEMA_VERSIONS = frozenset({CURRENT_SCHEMA_VERSION})


class UnsupportedSchemaVersionError(ValueError):
    """Raised when a stored snapshot carries a schema version this package cannot read."""


def from_serialized_state_to_storable_format(
    state: SerializedSceneState, bridge: TypeCodeBridge = DEFAULT_BRIDGE
) -> StorableSceneState:
    entities = [
        StorableEntity(
            id=entity.id,
            components=[
                StorableComponent(type=bridge.to_human_readable(component.type), value=component.value)
                for component in entity.components
            ],
        )
        for entity in state.entities
    ]
    return StorableSceneState(schema_version=CURRENT_SCHEMA_VERSION, entities=entities)


def from_storable_format_to_serialized_state(
    state: StorableSceneState, bridge: TypeCodeBridge = DEFAULT_BRIDGE
) -> SerializedSceneState:
    """Map a snapshot back to the wire shape. The schema version is not checked here."""

    entities = [
        SerializedEntity(
            id=entity.id,
            components=[
                SerializedComponent(type=bridge.from_human_readable(component.type), value=component.value)
                for component in entity.components
            ],
        )
        for entity in state.entities
    ]
    return SerializedSceneState(entities=entities)


def is_supported_schema_version(state: StorableSceneState) -> bool:
    return state.schema_version in SUPPORTED_SCHEMA_VERSIONS

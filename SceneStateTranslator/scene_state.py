"""In-memory scene graph and its conversion to the internal wire shape."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .schemas import Component, SerializedComponent, SerializedEntity, SerializedSceneState


class SceneStateDefinition:
    """Ordered entity -> components map; entities iterate in insertion order."""

    def __init__(self) -> None:
        self._entities: Dict[str, List[Component]] = {}

    def add_entity(self, entity_id: str, components: Iterable[Component]) -> None:
        self._entities[entity_id] = list(components)

    def remove_entity(self, entity_id: str) -> None:
        self._entities.pop(entity_id, None)

    def get_entity(self, entity_id: str) -> Optional[List[Component]]:
        return self._entities.get(entity_id)

    def entities(self) -> Iterator[Tuple[str, List[Component]]]:
        return iter(self._entities.items())

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)


def serialize_scene_state(scene: SceneStateDefinition) -> SerializedSceneState:
    return SerializedSceneState(
        entities=[
            SerializedEntity(
                id=entity_id,
                components=[SerializedComponent(type=component.code, value=component.data) for component in components],
            )
            for entity_id, components in scene.entities()
        ]
    )


def deserialize_scene_state(state: SerializedSceneState) -> SceneStateDefinition:
    scene = SceneStateDefinition()
    for entity in state.entities:
        components = [Component(code=component.type, data=component.value) for component in entity.components]
        scene.add_entity(entity.id, components)
    return scene

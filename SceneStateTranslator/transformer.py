"""Per-component field transcoding between the runtime and builder shapes."""
from __future__ import annotations

import copy
from typing import Protocol, runtime_checkable

from .schemas import BuilderComponent, Component


@runtime_checkable
class ComponentTransformer(Protocol):
    """Converts a single component payload between the two wire shapes."""

    def transform_builder_component(self, component: BuilderComponent) -> BuilderComponent:
        ...

    def transform_state_definition_component(self, component: Component) -> Component:
        ...


class PassthroughTransformer:
    """Transformer for runtimes whose payloads already match the builder fields."""

    def transform_builder_component(self, component: BuilderComponent) -> BuilderComponent:
        return BuilderComponent(id=component.id, type=component.type, data=copy.deepcopy(component.data))

    def transform_state_definition_component(self, component: Component) -> Component:
        return Component(code=component.code, data=copy.deepcopy(component.data))

"""Translation between the runtime scene graph and the builder manifest."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .asset_catalog import AssetCatalog
from .naming import camelize, mint_component_id, nft_name, unique_name
from .payloads import (
    ComponentPayload,
    GLTFShapePayload,
    NamePayload,
    NFTShapePayload,
    UnityColor,
    dump_payload,
    parse_payload,
)
from .scene_state import SceneStateDefinition
from .schemas import (
    BuilderComponent,
    BuilderEntity,
    BuilderGround,
    BuilderManifest,
    BuilderScene,
    Component,
)
from .transformer import ComponentTransformer, PassthroughTransformer
from .type_codes import DEFAULT_BRIDGE, GLTF_SHAPE, NAME, TypeCodeBridge

logger = logging.getLogger(__name__)

GROUND_CATEGORY = "ground"
NFT_URL_PREFIX = "ethereum://"
NFT_DEFAULT_COLOR = UnityColor(r=0.6404918, g=0.611472, b=0.8584906, a=1.0)
NFT_DEFAULT_STYLE = 0


@dataclass
class NamingState:
    """Names handed out so far during one forward translation."""

    taken_names: List[str] = field(default_factory=list)
    nft_count: int = 0


@dataclass
class TranslationDiagnostics:
    """Anomalies tolerated while reading a builder scene."""

    skipped_component_refs: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_component_refs)


def _parse(kind: str, data: Any, entity_id: str) -> ComponentPayload:
    try:
        return parse_payload(kind, data)
    except ValueError as exc:
        raise ValueError(f"Invalid {kind} payload on entity {entity_id!r}: {exc}") from exc


async def _gltf_entity_name(
    payload: GLTFShapePayload, naming: NamingState, catalog: AssetCatalog
) -> Optional[str]:
    if not payload.asset_id:
        return None
    name: Optional[str] = None
    assets = await catalog.get_assets([payload.asset_id])
    for asset in assets.values():
        name = unique_name(naming.taken_names, camelize(asset.name))
    return name


async def _translate_entity(
    entity_id: str,
    components: List[Component],
    naming: NamingState,
    catalog: AssetCatalog,
    transformer: ComponentTransformer,
    bridge: TypeCodeBridge,
) -> Tuple[BuilderEntity, Dict[str, BuilderComponent]]:
    entity_name = entity_id
    staged: List[Tuple[str, str, ComponentPayload]] = []

    for component in components:
        # Runtime components have no instance id, the builder needs one per component.
        component_id = mint_component_id()
        kind = bridge.to_human_readable(component.code)
        payload = _parse(kind, component.data, entity_id)

        if isinstance(payload, NFTShapePayload):
            if payload.src is not None:
                payload.url = payload.src
            naming.nft_count += 1
            entity_name = nft_name(naming.nft_count)
        elif isinstance(payload, GLTFShapePayload):
            entity_name = await _gltf_entity_name(payload, naming, catalog) or entity_name

        staged.append((component_id, kind, payload))

    for _, _, payload in staged:
        if isinstance(payload, NamePayload):
            payload.builder_value = entity_name

    naming.taken_names.append(entity_name)

    translated: Dict[str, BuilderComponent] = {}
    for component_id, kind, payload in staged:
        builder_component = transformer.transform_builder_component(
            BuilderComponent(id=component_id, type=kind, data=dump_payload(payload))
        )
        translated[builder_component.id] = builder_component

    entity = BuilderEntity(
        id=entity_id,
        name=entity_name,
        components=[component_id for component_id, _, _ in staged],
        disable_gizmos=False,
    )
    return entity, translated


def _referenced_asset_ids(scene: BuilderScene) -> List[str]:
    referenced: Dict[str, None] = {}
    for component in scene.components.values():
        if component.type != GLTF_SHAPE:
            continue
        asset_id = component.data.get("assetId")
        if asset_id:
            referenced.setdefault(asset_id, None)
    return list(referenced)


async def reconcile_assets(scene: BuilderScene, catalog: AssetCatalog) -> None:
    """Make ``scene.assets`` hold exactly the assets referenced by GLTF shapes.

    Assets already in the table are kept without a lookup, missing ones are fetched
    in a single catalog call and unreferenced ones are dropped. The table is ordered
    by first reference in component order.
    """

    referenced = _referenced_asset_ids(scene)
    missing = [asset_id for asset_id in referenced if asset_id not in scene.assets]

    known = dict(scene.assets)
    if missing:
        logger.debug("Fetching %d assets missing from the manifest: %s", len(missing), missing)
        known.update(await catalog.get_assets(missing))

    unresolved = [asset_id for asset_id in referenced if asset_id not in known]
    if unresolved:
        logger.warning("Asset catalog has no entry for %d referenced assets: %s", len(unresolved), unresolved)

    scene.assets = {asset_id: known[asset_id] for asset_id in referenced if asset_id in known}


def detect_ground(scene: BuilderScene) -> None:
    """Point ``scene.ground`` at the floor asset and lock the gizmos of the entity placing it."""

    ground_asset_id: Optional[str] = None
    for asset_id, asset in scene.assets.items():
        if asset.category == GROUND_CATEGORY:
            ground_asset_id = asset_id

    if ground_asset_id is None:
        if scene.ground is None:
            return
        if scene.ground.asset_id not in scene.assets:
            scene.ground = None
        elif scene.ground.component_id not in scene.components:
            ground = scene.ground.model_copy()
            ground.component_id = None
            scene.ground = ground
        return

    ground = scene.ground.model_copy() if scene.ground is not None else BuilderGround()
    ground.asset_id = ground_asset_id
    for component_id, component in scene.components.items():
        if component.data.get("assetId") == ground_asset_id:
            ground.component_id = component_id
    scene.ground = ground

    for entity in scene.entities.values():
        if ground.component_id in entity.components:
            entity.disable_gizmos = True


async def to_builder_from_state_definition(
    scene: SceneStateDefinition,
    manifest: BuilderManifest,
    catalog: AssetCatalog,
    transformer: Optional[ComponentTransformer] = None,
    bridge: TypeCodeBridge = DEFAULT_BRIDGE,
) -> BuilderManifest:
    """Build a fresh builder manifest for ``scene``.

    ``manifest`` supplies the scene id, metrics, limits, ground and the asset
    table already known to the builder. Neither ``scene`` nor ``manifest`` is
    modified. Catalog failures propagate.
    """

    transformer = transformer or PassthroughTransformer()
    naming = NamingState()
    entities: Dict[str, BuilderEntity] = {}
    components: Dict[str, BuilderComponent] = {}

    for entity_id, entity_components in scene.entities():
        entity, translated = await _translate_entity(
            entity_id, entity_components, naming, catalog, transformer, bridge
        )
        entities[entity.id] = entity
        components.update(translated)

    skeleton = manifest.scene
    builder_scene = BuilderScene(
        id=skeleton.id,
        entities=entities,
        components=components,
        assets={asset_id: asset.model_copy(deep=True) for asset_id, asset in skeleton.assets.items()},
        metrics=copy.deepcopy(skeleton.metrics),
        limits=copy.deepcopy(skeleton.limits),
        ground=skeleton.ground.model_copy() if skeleton.ground is not None else None,
    )

    await reconcile_assets(builder_scene, catalog)
    detect_ground(builder_scene)

    logger.debug(
        "Translated scene %s: %d entities, %d components, %d assets",
        builder_scene.id,
        len(entities),
        len(components),
        len(builder_scene.assets),
    )

    result = manifest.model_copy(deep=True)
    result.scene = builder_scene
    return result


def _nft_asset_id_from_url(url: str) -> str:
    remainder = url.replace(NFT_URL_PREFIX, "")
    separator = remainder.find("/")
    return remainder if separator < 0 else remainder[:separator]


def _apply_nft_compatibility(payload: NFTShapePayload) -> None:
    # Older builder payloads only carry the url.
    url = payload.url if isinstance(payload.url, str) else ""
    payload.src = url
    payload.asset_id = _nft_asset_id_from_url(url)
    payload.color = NFT_DEFAULT_COLOR.model_dump()
    payload.style = NFT_DEFAULT_STYLE


def _create_name_component(
    name: str, builder_name: str, transformer: ComponentTransformer, bridge: TypeCodeBridge
) -> Component:
    payload = NamePayload(value=name, builder_value=builder_name)
    return transformer.transform_state_definition_component(
        Component(code=bridge.from_human_readable(NAME), data=dump_payload(payload))
    )


def from_builder_to_state_definition_with_diagnostics(
    scene: BuilderScene,
    transformer: Optional[ComponentTransformer] = None,
    bridge: TypeCodeBridge = DEFAULT_BRIDGE,
) -> Tuple[SceneStateDefinition, TranslationDiagnostics]:
    """Rebuild the runtime scene graph from a builder scene.

    Component ids an entity lists but the scene does not define are skipped and
    reported in the returned diagnostics.
    """

    transformer = transformer or PassthroughTransformer()
    name_code = bridge.from_human_readable(NAME)
    diagnostics = TranslationDiagnostics()
    state = SceneStateDefinition()

    for entity in scene.entities.values():
        components: List[Component] = []
        for component_id in entity.components:
            builder_component = scene.components.get(component_id)
            if builder_component is None:
                logger.warning("Entity %s references unknown component %s; skipping", entity.id, component_id)
                diagnostics.skipped_component_refs.append((entity.id, component_id))
                continue

            payload = _parse(builder_component.type, builder_component.data, entity.id)
            if isinstance(payload, NFTShapePayload) and "src" not in builder_component.data:
                _apply_nft_compatibility(payload)

            component = transformer.transform_state_definition_component(
                Component(code=bridge.from_human_readable(builder_component.type), data=dump_payload(payload))
            )
            components.append(component)

        # Keep the builder name so smart-item references survive the round trip.
        name_component = next((component for component in components if component.code == name_code), None)
        if name_component is not None:
            name_payload = _parse(NAME, name_component.data, entity.id)
            name_payload.builder_value = entity.name
            name_component.data = dump_payload(name_payload)
        else:
            components.append(_create_name_component(entity.name, entity.name, transformer, bridge))

        state.add_entity(entity.id, components)

    if diagnostics.skipped_count:
        logger.warning("Skipped %d dangling component references in scene %s", diagnostics.skipped_count, scene.id)
    return state, diagnostics


def from_builder_to_state_definition(
    scene: BuilderScene,
    transformer: Optional[ComponentTransformer] = None,
    bridge: TypeCodeBridge = DEFAULT_BRIDGE,
) -> SceneStateDefinition:
    state, _ = from_builder_to_state_definition_with_diagnostics(scene, transformer, bridge)
    return state

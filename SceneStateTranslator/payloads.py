"""Typed views over component payloads for the kinds the translators rewrite.

Every payload is parsed into one variant keyed by the component's human-readable
type. Only the fields the translation rules read or write are declared, and they
are typed loosely so values pass through without coercion. Other fields are
carried through untouched and ``dump_payload`` only emits the fields that were
present on input or assigned afterwards, so a payload nobody edits comes back
out exactly as it went in.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Type, Union

from pydantic import BaseModel, ConfigDict, Field

from .type_codes import GLTF_SHAPE, NAME, NFT_SHAPE


class UnityColor(BaseModel):
    r: float
    g: float
    b: float
    a: float = 1.0

    model_config = ConfigDict(extra="allow")


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class NFTShapePayload(_Payload):
    """Image-as-NFT shape. The runtime reads ``src``, the builder reads ``url``."""

    src: Any = None
    url: Any = None
    asset_id: Any = Field(default=None, alias="assetId")
    color: Any = None
    style: Any = None


class GLTFShapePayload(_Payload):
    """Imported 3D model; ``assetId`` points into the asset catalog."""

    asset_id: Any = Field(default=None, alias="assetId")
    src: Any = None


class NamePayload(_Payload):
    """Entity name: ``value`` is the canonical name, ``builderValue`` the one shown in the builder."""

    value: Any = None
    builder_value: Any = Field(default=None, alias="builderValue")


class GenericPayload(_Payload):
    """Any component kind without translation rules."""


ComponentPayload = Union[NFTShapePayload, GLTFShapePayload, NamePayload, GenericPayload]

_VARIANTS: Dict[str, Type[_Payload]] = {
    NFT_SHAPE: NFTShapePayload,
    GLTF_SHAPE: GLTFShapePayload,
    NAME: NamePayload,
}


def parse_payload(kind: str, data: Any) -> ComponentPayload:
    """Parse ``data`` into the payload variant registered for ``kind``."""

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{kind} payload must be an object, got {type(data).__name__}")
    model = _VARIANTS.get(kind, GenericPayload)
    return model.model_validate(dict(data))


def dump_payload(payload: ComponentPayload) -> Dict[str, Any]:
    return payload.model_dump(by_alias=True, exclude_unset=True)

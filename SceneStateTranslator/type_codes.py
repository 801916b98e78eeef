"""Translation between internal component class ids and their human-readable names."""
from __future__ import annotations

from typing import Dict, Mapping

TRANSFORM = "Transform"
NFT_SHAPE = "NFTShape"
GLTF_SHAPE = "GLTFShape"
NAME = "Name"

DEFAULT_TYPE_CODES: Dict[int, str] = {
    1: TRANSFORM,
    16: "BoxShape",
    17: "SphereShape",
    18: "PlaneShape",
    19: "ConeShape",
    20: "CylinderShape",
    21: "TextShape",
    22: NFT_SHAPE,
    33: "Animator",
    54: GLTF_SHAPE,
    55: "OBJShape",
    64: "BasicMaterial",
    65: "Material",
    200: "AudioClip",
    201: "AudioSource",
    202: "AudioStream",
    203: "Gizmos",
    204: "SmartItem",
    300: NAME,
    301: "LockedOnEdit",
    302: "VisibleOnEdit",
}


class UnknownComponentTypeError(KeyError):
    """Raised for a class id or type name outside the supported set."""


class TypeCodeBridge:
    """Bidirectional lookup between class ids and human-readable type names."""

    def __init__(self, table: Mapping[int, str]) -> None:
        names: Dict[str, int] = {}
        for code, name in table.items():
            if name in names:
                raise ValueError(f"Type name {name!r} is mapped by both {names[name]} and {code}")
            names[name] = code
        self._names: Dict[int, str] = dict(table)
        self._codes = names

    def to_human_readable(self, code: int) -> str:
        try:
            return self._names[code]
        except KeyError:
            raise UnknownComponentTypeError(f"Unsupported component class id: {code!r}") from None

    def from_human_readable(self, name: str) -> int:
        try:
            return self._codes[name]
        except KeyError:
            raise UnknownComponentTypeError(f"Unsupported component type: {name!r}") from None

    def __contains__(self, item: object) -> bool:
        return item in self._names or item in self._codes


DEFAULT_BRIDGE = TypeCodeBridge(DEFAULT_TYPE_CODES)


def to_human_readable_type(code: int) -> str:
    return DEFAULT_BRIDGE.to_human_readable(code)


def from_human_readable_type(name: str) -> int:
    return DEFAULT_BRIDGE.from_human_readable(name)

"""Naming and identifier helpers shared by the builder translators."""
from __future__ import annotations

import re
from typing import Collection
from uuid import uuid4

_WORD_START = re.compile(r"(?:^\w|[A-Z]|\b\w)")
_WHITESPACE = re.compile(r"\s+")


def camelize(text: str) -> str:
    """Camel-case an asset name the way the builder expects (``"Big Tree"`` -> ``"bigTree"``)."""

    def _case(match: "re.Match[str]") -> str:
        word = match.group(0)
        return word.lower() if match.start() == 0 else word.upper()

    return _WHITESPACE.sub("", _WORD_START.sub(_case, text))


def unique_name(taken: Collection[str], base: str) -> str:
    """Return ``base`` or ``base<N>`` with the lowest N >= 2 not present in ``taken``."""

    candidate = base
    suffix = 1
    while candidate in taken:
        suffix += 1
        candidate = f"{base}{suffix}"
    return candidate


def nft_name(count: int) -> str:
    """Builder name for the ``count``-th NFT entity of a scene (1-based)."""

    return "nft" if count <= 1 else f"nft{count}"


def mint_component_id() -> str:
    return str(uuid4())

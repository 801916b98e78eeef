"""Asset catalog clients used to resolve asset metadata by id."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from .config import get_settings
from .schemas import BuilderAsset

logger = logging.getLogger(__name__)


@runtime_checkable
class AssetCatalog(Protocol):
    """Looks up asset metadata; ids the catalog does not know are left out of the result."""

    async def get_assets(self, ids: Iterable[str]) -> Dict[str, BuilderAsset]:
        ...


class InMemoryAssetCatalog:
    """Catalog backed by a fixed mapping. Every call's requested ids are kept in ``calls``."""

    def __init__(self, assets: Optional[Mapping[str, Any]] = None) -> None:
        self._assets: Dict[str, BuilderAsset] = {}
        for asset_id, asset in (assets or {}).items():
            self._assets[asset_id] = asset if isinstance(asset, BuilderAsset) else BuilderAsset.model_validate(asset)
        self.calls: List[List[str]] = []

    async def get_assets(self, ids: Iterable[str]) -> Dict[str, BuilderAsset]:
        requested = list(ids)
        self.calls.append(requested)
        return {asset_id: self._assets[asset_id].model_copy(deep=True) for asset_id in requested if asset_id in self._assets}


class BuilderApiAssetCatalog:
    """Catalog that queries the builder HTTP API (``GET /assets?id=...``)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if base_url is None or timeout is None:
            settings = get_settings()
            base_url = base_url or settings.builder_api_url
            timeout = timeout if timeout is not None else settings.builder_api_timeout
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)

    async def get_assets(self, ids: Iterable[str]) -> Dict[str, BuilderAsset]:
        requested = list(dict.fromkeys(ids))
        if not requested:
            return {}

        params = [("id", asset_id) for asset_id in requested]
        if self._client is not None:
            response = await self._client.get(f"{self.base_url}/assets", params=params)
        else:
            async with self._new_client() as client:
                response = await client.get("/assets", params=params)
        response.raise_for_status()

        assets = _parse_assets(response.json())
        logger.debug("Fetched %d of %d requested assets from %s", len(assets), len(requested), self.base_url)
        return {asset_id: asset for asset_id, asset in assets.items() if asset_id in requested}


def _parse_assets(body: Any) -> Dict[str, BuilderAsset]:
    entries = body.get("data", []) if isinstance(body, dict) else body
    if not isinstance(entries, list):
        raise ValueError(f"Unexpected asset catalog response: {body!r}")

    result: Dict[str, BuilderAsset] = {}
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("id"):
            continue
        try:
            asset = BuilderAsset.model_validate(entry)
        except ValidationError as exc:
            raise ValueError(f"Invalid asset {entry.get('id')!r} in catalog response: {exc}") from exc
        result[entry["id"]] = asset
    return result

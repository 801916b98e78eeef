from __future__ import annotations

import asyncio

import httpx
import pytest

from SceneStateTranslator.asset_catalog import AssetCatalog, BuilderApiAssetCatalog, InMemoryAssetCatalog

BASE_URL = "https://builder.test/v1"


def test_in_memory_catalog_omits_unknown_ids(catalog):
    assets = asyncio.run(catalog.get_assets(["tree-a", "deleted"]))

    assert list(assets) == ["tree-a"]
    assert assets["tree-a"].name == "Tree"
    assert catalog.calls == [["tree-a", "deleted"]]


def test_in_memory_catalog_returns_copies(catalog):
    first = asyncio.run(catalog.get_assets(["bench"]))
    first["bench"].name = "Changed"

    second = asyncio.run(catalog.get_assets(["bench"]))

    assert second["bench"].name == "Park Bench"


def test_catalogs_satisfy_protocol():
    assert isinstance(InMemoryAssetCatalog(), AssetCatalog)
    assert isinstance(BuilderApiAssetCatalog(base_url=BASE_URL, timeout=1.0), AssetCatalog)


def test_builder_api_catalog_queries_ids():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "ok": True,
                "data": [
                    {"id": "a1", "name": "Tree", "category": "nature", "thumbnail": "a1.png"},
                    {"id": "a2", "name": "Grass", "category": "ground"},
                    {"name": "no id"},
                    {"id": "other", "name": "Unrequested"},
                ],
            },
        )

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            catalog = BuilderApiAssetCatalog(base_url=BASE_URL, timeout=1.0, client=client)
            return await catalog.get_assets(["a1", "a2", "a1"])

    assets = asyncio.run(run())

    assert len(seen) == 1
    assert seen[0].url.path == "/v1/assets"
    assert seen[0].url.params.get_list("id") == ["a1", "a2"]
    assert sorted(assets) == ["a1", "a2"]
    assert assets["a2"].category == "ground"
    assert assets["a1"].model_dump()["thumbnail"] == "a1.png"


def test_builder_api_catalog_accepts_bare_list(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"id": "a1", "name": "Tree", "category": "nature"}])

    def new_client(self):
        return httpx.AsyncClient(base_url=self.base_url, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(BuilderApiAssetCatalog, "_new_client", new_client)
    catalog = BuilderApiAssetCatalog(base_url=BASE_URL, timeout=1.0)

    assets = asyncio.run(catalog.get_assets({"a1"}))

    assert assets["a1"].name == "Tree"


def test_builder_api_catalog_skips_request_for_no_ids():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await BuilderApiAssetCatalog(base_url=BASE_URL, timeout=1.0, client=client).get_assets([])

    assert asyncio.run(run()) == {}


def test_builder_api_catalog_raises_on_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"ok": False})

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await BuilderApiAssetCatalog(base_url=BASE_URL, timeout=1.0, client=client).get_assets(["a1"])

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(run())


def test_builder_api_catalog_uses_settings(monkeypatch):
    monkeypatch.setenv("BUILDER_API_URL", "https://builder.example/v2/")
    monkeypatch.setenv("BUILDER_API_TIMEOUT", "3")

    catalog = BuilderApiAssetCatalog()

    assert catalog.base_url == "https://builder.example/v2"
    assert catalog.timeout == 3.0

"""Unit tests for reference data providers.

HTTP calls are served by httpx.MockTransport; nothing leaves the process.
"""
import httpx
import pytest

from disc_categorizer.errors import ReferenceDataDecodeError, ReferenceDataError
from disc_categorizer.services.reference_client import (
    HttpReferenceDataProvider,
    StaticReferenceDataProvider,
)

BRANDS_PAYLOAD = {
    "data": [
        {"id": 1, "attributes": {"BrandName": "Innova", "Country": "US"}},
        {"id": 2, "attributes": {"BrandName": "Discraft"}},
    ]
}
DISCS_PAYLOAD = {
    "data": [
        {"id": 7, "attributes": {"MoldName": "Destroyer", "Speed": 12}},
        {"id": 8, "attributes": {"MoldName": "Buzzz"}},
    ]
}


def make_transport(routes):
    """Build a MockTransport answering each path from ``routes``.

    Returns the transport and the list of requested paths.
    """
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        route = routes[request.url.path]
        if isinstance(route, Exception):
            raise route
        return route

    return httpx.MockTransport(handler), seen


class TestHttpReferenceDataProvider:
    """Tests for HttpReferenceDataProvider."""

    @pytest.mark.asyncio
    async def test_fetches_names(self, settings):
        transport, seen = make_transport({
            "/brands": httpx.Response(200, json=BRANDS_PAYLOAD),
            "/discs": httpx.Response(200, json=DISCS_PAYLOAD),
        })

        async with HttpReferenceDataProvider(settings, transport=transport) as provider:
            brands = await provider.fetch_brand_names()
            molds = await provider.fetch_mold_names()

        assert brands == ["Innova", "Discraft"]
        assert molds == ["Destroyer", "Buzzz"]
        assert seen == ["/brands", "/discs"]

    @pytest.mark.asyncio
    async def test_configured_paths_are_used(self, settings):
        custom = settings.model_copy(update={"brands_path": "/api/brands"})
        transport, seen = make_transport({"/api/brands": httpx.Response(200, json=BRANDS_PAYLOAD)})

        async with HttpReferenceDataProvider(custom, transport=transport) as provider:
            assert await provider.fetch_brand_names() == ["Innova", "Discraft"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{"data": []}, {"data": None}, {}])
    async def test_empty_collections(self, settings, payload):
        transport, seen = make_transport({"/brands": httpx.Response(200, json=payload)})

        async with HttpReferenceDataProvider(settings, transport=transport) as provider:
            assert await provider.fetch_brand_names() == []

    @pytest.mark.asyncio
    async def test_http_error_status_raises(self, settings):
        transport, seen = make_transport({"/discs": httpx.Response(503, text="unavailable")})

        async with HttpReferenceDataProvider(settings, transport=transport) as provider:
            with pytest.raises(ReferenceDataError) as exc_info:
                await provider.fetch_mold_names()

        assert not isinstance(exc_info.value, ReferenceDataDecodeError)
        assert "503" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_connection_error_raises(self, settings):
        transport, seen = make_transport({"/brands": httpx.ConnectError("connection refused")})

        async with HttpReferenceDataProvider(settings, transport=transport) as provider:
            with pytest.raises(ReferenceDataError):
                await provider.fetch_brand_names()

    @pytest.mark.asyncio
    async def test_missing_name_field_is_decode_error(self, settings):
        payload = {"data": [{"attributes": {"Name": "Innova"}}]}
        transport, seen = make_transport({"/brands": httpx.Response(200, json=payload)})

        async with HttpReferenceDataProvider(settings, transport=transport) as provider:
            with pytest.raises(ReferenceDataDecodeError):
                await provider.fetch_brand_names()

    @pytest.mark.asyncio
    async def test_non_json_body_is_decode_error(self, settings):
        transport, seen = make_transport({"/discs": httpx.Response(200, text="<html>oops</html>")})

        async with HttpReferenceDataProvider(settings, transport=transport) as provider:
            with pytest.raises(ReferenceDataDecodeError):
                await provider.fetch_mold_names()

    @pytest.mark.asyncio
    async def test_use_outside_context_raises(self, settings):
        provider = HttpReferenceDataProvider(settings)

        with pytest.raises(ReferenceDataError):
            await provider.fetch_brand_names()


class TestStaticReferenceDataProvider:
    """Tests for StaticReferenceDataProvider."""

    @pytest.mark.asyncio
    async def test_from_files(self, tmp_path):
        brands_file = tmp_path / "brands.txt"
        molds_file = tmp_path / "molds.txt"
        brands_file.write_text("Innova\n\n  MVP  \n", encoding="utf-8")
        molds_file.write_text("Destroyer\nBuzzz\n", encoding="utf-8")

        provider = StaticReferenceDataProvider.from_files(brands_file, molds_file)

        assert await provider.fetch_brand_names() == ["Innova", "MVP"]
        assert await provider.fetch_mold_names() == ["Destroyer", "Buzzz"]

    @pytest.mark.asyncio
    async def test_configured_error_is_raised(self):
        provider = StaticReferenceDataProvider(brand_error=ReferenceDataError("down"))

        with pytest.raises(ReferenceDataError):
            await provider.fetch_brand_names()
        assert await provider.fetch_mold_names() == []

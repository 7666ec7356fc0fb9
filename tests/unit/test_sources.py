"""Bundle sources: HTTP transport handling and packaged resources."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from langswitch.i18n import (
    FetchError,
    HttpBundleSource,
    PackageBundleSource,
    ParseError,
    available_locales,
    read_bundle,
)


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/mock/fr.json":
        return httpx.Response(200, json={"Table.Id": "Identifiant"})
    if request.url.path == "/mock/de.json":
        return httpx.Response(200, content=b"{not json")
    if request.url.path == "/mock/list.json":
        return httpx.Response(200, json=["not", "an", "object"])
    if request.url.path == "/mock/down.json":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(404, json={"error": "not_found"})


def _fetch(lang: str):
    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
        async with HttpBundleSource("http://bundles.test/", client=client) as source:
            try:
                return await source.fetch(lang)
            finally:
                await client.aclose()

    return asyncio.run(scenario())


def test_http_source_returns_json_object() -> None:
    assert _fetch("fr") == {"Table.Id": "Identifiant"}


def test_http_source_reports_status_on_failure() -> None:
    with pytest.raises(FetchError) as excinfo:
        _fetch("xx")

    assert excinfo.value.status == 404
    assert excinfo.value.lang == "xx"


def test_http_source_wraps_transport_errors() -> None:
    with pytest.raises(FetchError) as excinfo:
        _fetch("down")

    assert excinfo.value.status is None


@pytest.mark.parametrize("lang", ["de", "list"])
def test_http_source_rejects_malformed_payloads(lang: str) -> None:
    with pytest.raises(ParseError):
        _fetch(lang)


def test_http_source_builds_urls_from_template() -> None:
    source = HttpBundleSource(
        "http://bundles.test/", path_template="/i18n/{lang}/messages.json"
    )
    try:
        assert source.url_for("fr") == "http://bundles.test/i18n/fr/messages.json"
    finally:
        asyncio.run(source.aclose())


def test_packaged_locales_are_discovered() -> None:
    assert set(available_locales()) >= {"en", "fr", "zh"}


def test_package_source_reads_shipped_bundles() -> None:
    bundle = asyncio.run(PackageBundleSource().fetch("fr"))

    assert bundle["Table"]["Id"] == "Identifiant"
    assert bundle == read_bundle("fr")


def test_package_source_reports_missing_bundles() -> None:
    with pytest.raises(FetchError) as excinfo:
        asyncio.run(PackageBundleSource().fetch("xx"))

    assert excinfo.value.status == 404


def test_http_source_encodes_language_into_one_segment() -> None:
    source = HttpBundleSource("http://bundles.test")

    url = source.url_for("../api/v1/people?x=")
    asyncio.run(source.aclose())

    assert url == "http://bundles.test/mock/..%2Fapi%2Fv1%2Fpeople%3Fx%3D.json"
    assert "/api/v1/people" not in url

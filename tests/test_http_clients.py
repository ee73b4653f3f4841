"""Tests for the Open Food Facts HTTP adapter."""

import asyncio

import httpx
import pytest

from nutrition_query.adapters.off_client import HttpxOpenFoodFactsClient
from nutrition_query.domain.errors import (
    LookupBadJsonError,
    LookupHttpError,
    LookupNetworkError,
)


def _client(handler) -> HttpxOpenFoodFactsClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxOpenFoodFactsClient(
        base_url="https://off.test/",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_search_products_sends_search_parameters() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"products": [{"product_name": "Miel"}]})

    client = _client(handler)

    payload = asyncio.run(client.search_products("miel", language="es", page_size=10))

    assert payload == {"products": [{"product_name": "Miel"}]}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/cgi/search.pl"
    assert request.headers["accept"] == "application/json"
    params = request.url.params
    assert params["search_terms"] == "miel"
    assert params["search_simple"] == "1"
    assert params["action"] == "process"
    assert params["json"] == "1"
    assert params["page_size"] == "10"
    assert params["tagtype_0"] == "languages"
    assert params["tag_contains_0"] == "contains"
    assert params["tag_0"] == "es"
    assert params["fields"] == "product_name,nutriments,categories_tags,languages_tags"
    assert params["sort_by"] == "unique_scans_n"


def test_search_products_raises_on_http_error_with_truncated_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="x" * 500)

    client = _client(handler)

    with pytest.raises(LookupHttpError) as excinfo:
        asyncio.run(client.search_products("miel", language="es"))

    assert excinfo.value.status == 503
    assert excinfo.value.detail == "x" * 200
    assert excinfo.value.kind == "off_http_error"


def test_search_products_raises_on_bad_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>busy</html>")

    client = _client(handler)

    with pytest.raises(LookupBadJsonError):
        asyncio.run(client.search_products("miel", language="es"))


def test_search_products_raises_on_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)

    with pytest.raises(LookupNetworkError) as excinfo:
        asyncio.run(client.search_products("miel", language="es"))

    assert excinfo.value.kind == "network_error"


def test_create_sets_user_agent() -> None:
    client = HttpxOpenFoodFactsClient.create(
        base_url="https://off.test", user_agent="nutrition-query-tests/1.0"
    )

    assert client.http_client.headers["user-agent"] == "nutrition-query-tests/1.0"
    asyncio.run(client.close())


def test_search_products_treats_redirect_loops_as_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.TooManyRedirects("redirect loop", request=request)

    client = _client(handler)

    with pytest.raises(LookupNetworkError):
        asyncio.run(client.search_products("miel", language="es"))

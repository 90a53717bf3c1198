"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from calorie_estimator.adapters.open_food_facts_client import HttpxOpenFoodFactsClient


def test_open_food_facts_client_search() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"products": [{"product_name": "Rice"}]})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test", http_client=async_client
    )

    payload = asyncio.run(client.search_products("brown rice"))

    assert payload == {"products": [{"product_name": "Rice"}]}
    request = seen[0]
    assert request.url.path == "/cgi/search.pl"
    assert request.url.params["search_terms"] == "brown rice"
    assert request.url.params["json"] == "1"
    assert "nutriments" in request.url.params["fields"]


def test_open_food_facts_client_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test", http_client=async_client
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.search_products("rice"))


def test_open_food_facts_client_close() -> None:
    client = HttpxOpenFoodFactsClient.create("https://off.test", timeout_seconds=1)

    asyncio.run(client.close())

    assert client.http_client.is_closed

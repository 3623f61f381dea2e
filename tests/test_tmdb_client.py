"""Tests for the TMDB API client helpers."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.services.tmdb import TMDBClient, UpstreamError
from conftest import build_settings


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="https://tmdb.test"
    )


def test_client_requires_api_key() -> None:
    with pytest.raises(ValueError):
        TMDBClient(build_settings(TMDB_API_KEY=None), httpx.AsyncClient())


@pytest.mark.anyio("asyncio")
async def test_requests_carry_key_language_and_region() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"results": [{"id": 1}, "junk", {"id": 2}]})

    async with _client(handler) as http_client:
        client = TMDBClient(
            build_settings(TMDB_LANGUAGE="de-DE", TMDB_REGION="DE"), http_client
        )
        results = await client.fetch_category_listing(
            "/discover/movie", {"with_genres": "28", "page": None, "empty": ""}
        )

    assert results == [{"id": 1}, {"id": 2}]
    params = requests[0].url.params
    assert requests[0].url.path == "/discover/movie"
    assert params["api_key"] == "test-key"
    assert params["language"] == "de-DE"
    assert params["region"] == "DE"
    assert params["with_genres"] == "28"
    assert "page" not in params
    assert "empty" not in params


@pytest.mark.anyio("asyncio")
async def test_blank_region_is_not_sent() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"genres": []})

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(TMDB_REGION=""), http_client)
        await client.fetch_genre_map("movie")

    assert "region" not in requests[0].url.params


@pytest.mark.anyio("asyncio")
async def test_genre_map_lowercases_names() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/genre/tv/list"
        return httpx.Response(
            200,
            json={
                "genres": [
                    {"id": 10759, "name": "Action & Adventure"},
                    {"id": 18, "name": "Drama"},
                    {"name": "No Id"},
                ]
            },
        )

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(), http_client)
        mapping = await client.fetch_genre_map("series")

    assert mapping == {"action & adventure": 10759, "drama": 18}


@pytest.mark.anyio("asyncio")
async def test_retries_then_succeeds() -> None:
    calls = 0

    def handler(_: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        if calls == 1:
            return httpx.Response(502, text="bad gateway")
        return httpx.Response(200, json={"results": [{"id": 9}]})

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(), http_client)
        results = await client.fetch_category_listing("/movie/popular")

    assert calls == 2
    assert results == [{"id": 9}]


@pytest.mark.anyio("asyncio")
async def test_exhausted_retries_raise_upstream_error() -> None:
    calls = 0

    def handler(_: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(401, json={"status_message": "Invalid API key"})

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(TMDB_RETRY_ATTEMPTS=3), http_client)
        with pytest.raises(UpstreamError):
            await client.fetch_genre_map("movie")

    assert calls == 3


@pytest.mark.anyio("asyncio")
async def test_network_errors_raise_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(), http_client)
        with pytest.raises(UpstreamError) as excinfo:
            await client.fetch_category_listing("/movie/popular")

    assert isinstance(excinfo.value.__cause__, httpx.ConnectTimeout)


@pytest.mark.anyio("asyncio")
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["not", "an", "object"]),
    ],
)
async def test_malformed_bodies_are_failures(response: httpx.Response) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return response

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(TMDB_RETRY_ATTEMPTS=1), http_client)
        with pytest.raises(UpstreamError):
            await client.fetch_category_listing("/movie/popular")


@pytest.mark.anyio("asyncio")
async def test_trailer_prefers_trailer_over_teaser() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/tv/1399/videos"
        return httpx.Response(
            200,
            json={
                "results": [
                    {"site": "YouTube", "type": "Teaser", "key": "teaser"},
                    {"site": "Vimeo", "type": "Trailer", "key": "vimeo"},
                    {"site": "YouTube", "type": "Trailer", "key": "trailer"},
                ]
            },
        )

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(), http_client)
        url = await client.fetch_trailer_url("1399", "series")

    assert url == "https://www.youtube.com/embed/trailer"


@pytest.mark.anyio("asyncio")
async def test_trailer_falls_back_to_clip() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "results": [
                    {"site": "YouTube", "type": "Featurette", "key": "feature"},
                    {"site": "YouTube", "type": "Clip", "key": "clip"},
                ]
            },
        )

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(), http_client)
        url = await client.fetch_trailer_url(603, "movie")

    assert url == "https://www.youtube.com/embed/clip"


@pytest.mark.anyio("asyncio")
async def test_trailer_missing_returns_empty_string() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"results": [{"site": "Vimeo", "type": "Trailer", "key": "x"}]}
        )

    async with _client(handler) as http_client:
        client = TMDBClient(build_settings(), http_client)
        url = await client.fetch_trailer_url(603, "movie")

    assert url == ""


@pytest.mark.anyio("asyncio")
async def test_slow_response_hits_call_deadline() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"results": []})

    async with _client(handler) as http_client:
        client = TMDBClient(
            build_settings(TMDB_TIMEOUT_MS=100, TMDB_RETRY_ATTEMPTS=1), http_client
        )
        with pytest.raises(UpstreamError) as excinfo:
            await client.fetch_category_listing("/movie/popular")

    assert isinstance(excinfo.value.__cause__, asyncio.TimeoutError)

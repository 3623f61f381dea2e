"""Pytest configuration and test helpers."""

from __future__ import annotations

import sys
import zlib
from pathlib import Path
from typing import Any

import httpx
import pytest


# Ensure the application package is importable when running tests without an
# editable install. This mirrors the expected runtime layout where ``app`` sits
# at the project root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.config import Settings  # noqa: E402


MOVIE_GENRES = [
    {"id": 28, "name": "Action"},
    {"id": 35, "name": "Comedy"},
    {"id": 10402, "name": "Music"},
]
TV_GENRES = [{"id": 18, "name": "Drama"}]
ITEMS_PER_LISTING = 20


class FakeTMDB:
    """In-memory stand-in for the TMDB HTTP API."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.fail_all = False
        self.fail_paths: set[str] = set()
        self.video_failures: set[str] = set()
        self.videos: dict[str, list[dict[str, Any]]] = {}
        self.default_videos: list[dict[str, Any]] = [
            {"site": "YouTube", "type": "Trailer", "key": "trailer-key"}
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if self.fail_all or path in self.fail_paths:
            return httpx.Response(503, json={"status_message": "Service unavailable"})
        if path == "/genre/movie/list":
            return httpx.Response(200, json={"genres": MOVIE_GENRES})
        if path == "/genre/tv/list":
            return httpx.Response(200, json={"genres": TV_GENRES})
        if path.endswith("/videos"):
            if path in self.video_failures:
                return httpx.Response(500, json={"status_message": "boom"})
            return httpx.Response(
                200, json={"results": self.videos.get(path, self.default_videos)}
            )
        return httpx.Response(200, json={"results": self._listing(request)})

    def _listing(self, request: httpx.Request) -> list[dict[str, Any]]:
        path = request.url.path
        key = f"{path}?{request.url.params.get('with_genres', '')}"
        base = zlib.crc32(key.encode()) % 100_000 * 100
        is_tv = "/tv" in path
        items: list[dict[str, Any]] = []
        for index in range(ITEMS_PER_LISTING):
            item: dict[str, Any] = {
                "id": base + index,
                "overview": f"Overview {index}",
                "poster_path": f"/poster-{index}.jpg",
                "backdrop_path": f"/backdrop-{index}.jpg",
                "adult": False,
            }
            if is_tv:
                item["name"] = f"Show {base + index}"
                item["first_air_date"] = "2021-03-04"
            else:
                item["title"] = f"Movie {base + index}"
                item["release_date"] = "2019-07-01"
            items.append(item)
        return items

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            base_url="https://tmdb.test",
        )


def build_settings(**overrides: Any) -> Settings:
    """Return a settings object with defaults suitable for tests."""

    base: dict[str, Any] = {
        "TMDB_API_KEY": "test-key",
        "TMDB_RETRY_BACKOFF_MS": 0,
        "DATABASE_URL": "",
    }
    base.update(overrides)
    return Settings(_env_file=None, **base)  # type: ignore[arg-type]


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO tests to run on asyncio without requiring trio."""

    return "asyncio"


@pytest.fixture
def fake_tmdb() -> FakeTMDB:
    return FakeTMDB()


@pytest.fixture
def settings_factory():
    return build_settings

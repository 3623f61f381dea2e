"""Client for The Movie Database (TMDB) catalog endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from ..config import Settings
from ..models import ContentType

logger = logging.getLogger(__name__)

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"
TRAILER_SITE = "YouTube"
TRAILER_PRIORITY: tuple[str, ...] = ("Trailer", "Teaser", "Clip")


class UpstreamError(RuntimeError):
    """Raised when TMDB cannot produce a usable response."""


class UpstreamNotConfiguredError(UpstreamError):
    """Raised when TMDB is requested but no API key is configured."""


class TMDBClient:
    """Issue authenticated TMDB requests with a timeout and bounded retries."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        if not settings.tmdb_api_key:
            raise ValueError("TMDB API key is required when initialising TMDBClient")
        self._settings = settings
        self._client = http_client
        self._attempts = settings.tmdb_retry_attempts
        self._backoff_seconds = settings.tmdb_retry_backoff_ms / 1000
        self._timeout = httpx.Timeout(settings.tmdb_timeout_seconds)
        self._deadline_seconds = settings.tmdb_timeout_seconds
        self._semaphore = asyncio.Semaphore(settings.tmdb_max_concurrency)

    async def fetch_genre_map(self, kind: ContentType) -> dict[str, int]:
        """Return a mapping of lowercased genre names to TMDB genre ids."""

        path = "/genre/tv/list" if kind == "series" else "/genre/movie/list"
        payload = await self._request(path)
        genres = payload.get("genres") or []
        mapping: dict[str, int] = {}
        if not isinstance(genres, list):
            return mapping
        for genre in genres:
            if not isinstance(genre, dict):
                continue
            name = genre.get("name")
            genre_id = genre.get("id")
            if isinstance(name, str) and name and genre_id:
                mapping[name.lower()] = genre_id
        return mapping

    async def fetch_category_listing(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Return the ordered ``results`` of a listing endpoint."""

        payload = await self._request(path, params)
        results = payload.get("results") or []
        if not isinstance(results, list):
            raise UpstreamError(f"TMDB listing {path} returned malformed results")
        return [item for item in results if isinstance(item, dict)]

    async def fetch_trailer_url(self, external_id: str | int, kind: ContentType) -> str:
        """Return an embeddable trailer URL or an empty string when none exists."""

        segment = "tv" if kind == "series" else "movie"
        path = f"/{segment}/{quote(str(external_id), safe='')}/videos"
        payload = await self._request(path)
        videos = payload.get("results") or []
        if not isinstance(videos, list):
            return ""
        for video_type in TRAILER_PRIORITY:
            for video in videos:
                if not isinstance(video, dict):
                    continue
                if video.get("site") == TRAILER_SITE and video.get("type") == video_type:
                    key = video.get("key")
                    if key:
                        return f"{YOUTUBE_EMBED_BASE}{key}"
        return ""

    def _build_params(self, params: Mapping[str, Any] | None) -> dict[str, Any]:
        query: dict[str, Any] = {"api_key": self._settings.tmdb_api_key}
        if self._settings.tmdb_language:
            query["language"] = self._settings.tmdb_language
        if self._settings.tmdb_region:
            query["region"] = self._settings.tmdb_region
        for key, value in (params or {}).items():
            if value is None or value == "":
                continue
            query[key] = value
        return query

    async def _request(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Perform a GET request and return the decoded JSON object."""

        query = self._build_params(params)
        last_error: Exception | None = None
        for attempt in range(1, self._attempts + 1):
            try:
                async with self._semaphore:
                    # httpx bounds each phase; wait_for bounds the whole call.
                    response = await asyncio.wait_for(
                        self._client.get(path, params=query, timeout=self._timeout),
                        timeout=self._deadline_seconds,
                    )
                if response.status_code >= 400:
                    raise UpstreamError(
                        f"TMDB request failed with {response.status_code}: "
                        f"{self._error_message(response)}"
                    )
                payload = response.json()
                if not isinstance(payload, dict):
                    raise UpstreamError("Unexpected TMDB response structure")
                return payload
            except (
                httpx.HTTPError, asyncio.TimeoutError, ValueError, UpstreamError
            ) as exc:
                last_error = exc
                if attempt < self._attempts:
                    backoff = self._backoff_seconds * attempt
                    logger.info(
                        "TMDB fetch for %s failed (%s). Retrying in %.1fs",
                        path,
                        exc.__class__.__name__,
                        backoff,
                    )
                    await asyncio.sleep(backoff)
                    continue
                logger.warning(
                    "TMDB fetch for %s failed after %s attempt(s): %s",
                    path,
                    self._attempts,
                    exc,
                )
        raise UpstreamError(f"TMDB request to {path} failed") from last_error

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text[:200] or "TMDB request failed"
        if isinstance(data, dict):
            message = data.get("status_message") or data.get("message")
            if message:
                return str(message)
        return "TMDB request failed"

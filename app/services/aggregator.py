"""Catalog aggregation across the upstream provider, the store and the seed list."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from ..categories import EDITORIAL_CATEGORIES, CategoryDefinition, build_genre_categories
from ..config import PER_CATEGORY_MAX, PER_CATEGORY_MIN, Settings
from ..models import (
    CatalogSource,
    ContentRecord,
    ContentType,
    ListingQuery,
    ListingResult,
    SeedRecord,
    UpstreamItem,
)
from ..seed_catalog import SEED_CATALOG
from ..utils import clamp
from .catalog_store import CatalogStore, StoreFilter, StoreUnavailableError
from .health import UpstreamHealthTracker
from .normalization import normalize, normalize_upstream_item
from .tmdb import TMDBClient, UpstreamError, UpstreamNotConfiguredError

logger = logging.getLogger(__name__)

LIMIT_MIN = 1
LIMIT_MAX = 500
TRAILER_CATEGORY_COUNT = 2
TRAILER_ITEMS_PER_CATEGORY = 3


class AggregationStage(str, Enum):
    TRY_UPSTREAM = "try_upstream"
    TRY_STORE = "try_store"
    USE_SEED = "use_seed"
    DONE = "done"


@dataclass(slots=True)
class StageOutcome:
    """Either the listing a stage produced or the reason it fell through."""

    result: ListingResult | None = None
    fallback_reason: str | None = None

    @classmethod
    def served(cls, source: CatalogSource, records: list[ContentRecord]) -> "StageOutcome":
        return cls(result=ListingResult(source=source, records=records))

    @classmethod
    def fall_through(cls, reason: str) -> "StageOutcome":
        return cls(fallback_reason=reason)


@dataclass(slots=True)
class CategoryListing:
    definition: CategoryDefinition
    items: list[dict[str, Any]] = field(default_factory=list)


class CatalogAggregator:
    """Serve a listing from exactly one source, degrading tier by tier."""

    def __init__(
        self,
        settings: Settings,
        *,
        tmdb: TMDBClient | None,
        store: CatalogStore | None,
        health: UpstreamHealthTracker,
        seed_catalog: Sequence[SeedRecord] = SEED_CATALOG,
    ) -> None:
        self._settings = settings
        self._tmdb = tmdb
        self._store = store
        self._health = health
        self._seed_catalog = tuple(seed_catalog)

    @property
    def health(self) -> UpstreamHealthTracker:
        return self._health

    @property
    def upstream_configured(self) -> bool:
        return self._tmdb is not None

    @property
    def store_configured(self) -> bool:
        return self._store is not None

    async def store_ready(self) -> bool:
        if self._store is None:
            return False
        return await self._store.is_ready()

    async def list_content(self, query: ListingQuery) -> ListingResult:
        """Return the listing for ``query`` from the first available source."""

        stage = self._initial_stage(query)
        while stage is not AggregationStage.DONE:
            if stage is AggregationStage.TRY_UPSTREAM:
                outcome = await self._try_upstream(query)
                next_stage = AggregationStage.TRY_STORE
            elif stage is AggregationStage.TRY_STORE:
                outcome = await self._try_store(query)
                next_stage = AggregationStage.USE_SEED
            else:
                outcome = self._use_seed(query)
                next_stage = AggregationStage.DONE

            if outcome.result is not None:
                return outcome.result
            logger.warning(
                "Catalog stage %s fell through: %s", stage.value, outcome.fallback_reason
            )
            stage = next_stage

        raise RuntimeError("Catalog stages finished without serving a listing")

    async def resolve_trailer(self, kind: ContentType, external_id: str) -> str:
        """Look up a trailer directly; there is no fallback for this call."""

        if self._tmdb is None:
            raise UpstreamNotConfiguredError("TMDB trailer service is unavailable.")
        return await self._tmdb.fetch_trailer_url(external_id, kind)

    def _initial_stage(self, query: ListingQuery) -> AggregationStage:
        if query.forces_store or self._tmdb is None:
            return AggregationStage.TRY_STORE
        if not self._health.is_eligible():
            logger.warning("TMDB temporarily disabled, serving database/seed data.")
            return AggregationStage.TRY_STORE
        return AggregationStage.TRY_UPSTREAM

    def _listing_limit(self, query: ListingQuery) -> int:
        if query.limit is None:
            return self._settings.listing_default_limit
        return clamp(query.limit, LIMIT_MIN, LIMIT_MAX)

    def _per_category(self, query: ListingQuery) -> int:
        if query.per_category is None:
            return self._settings.catalog_per_category
        return clamp(query.per_category, PER_CATEGORY_MIN, PER_CATEGORY_MAX)

    async def _try_upstream(self, query: ListingQuery) -> StageOutcome:
        tmdb = self._tmdb
        if tmdb is None:
            return StageOutcome.fall_through("TMDB not configured")
        try:
            records = await self._fetch_upstream(tmdb, self._per_category(query))
        except UpstreamError as exc:
            self._health.record_failure()
            return StageOutcome.fall_through(f"TMDB unavailable: {exc}")
        self._health.record_success()
        return StageOutcome.served("tmdb", records)

    async def _fetch_upstream(
        self, tmdb: TMDBClient, per_category: int
    ) -> list[ContentRecord]:
        genre_maps = await asyncio.gather(
            tmdb.fetch_genre_map("movie"),
            tmdb.fetch_genre_map("series"),
            return_exceptions=True,
        )
        movie_genres, series_genres = _raise_first_failure(
            genre_maps, ("movie genres", "series genres")
        )
        definitions = [
            *EDITORIAL_CATEGORIES,
            *build_genre_categories(movie_genres, series_genres),
        ]

        responses = await asyncio.gather(
            *(
                tmdb.fetch_category_listing(definition.path, definition.params)
                for definition in definitions
            ),
            return_exceptions=True,
        )
        results = _raise_first_failure(
            responses, [definition.title for definition in definitions]
        )
        listings = [
            CategoryListing(definition, items[:per_category])
            for definition, items in zip(definitions, results)
        ]

        trailers = await self._resolve_trailers(tmdb, listings)

        records: list[ContentRecord] = []
        image_base = self._settings.tmdb_image_base
        for category_index, listing in enumerate(listings):
            kind = listing.definition.kind
            for item_index, payload in enumerate(listing.items):
                records.append(
                    normalize_upstream_item(
                        UpstreamItem(
                            payload=payload,
                            kind=kind,
                            category=listing.definition.title,
                        ),
                        trailer_url=trailers.get((kind, str(payload.get("id"))), ""),
                        featured=category_index == 0 and item_index == 0,
                        image_base=image_base,
                    )
                )
        return records

    async def _resolve_trailers(
        self, tmdb: TMDBClient, listings: Sequence[CategoryListing]
    ) -> dict[tuple[str, str], str]:
        """Resolve trailers for the leading items; individual failures are ignored."""

        targets: list[tuple[ContentType, str]] = []
        for listing in listings[:TRAILER_CATEGORY_COUNT]:
            for payload in listing.items[:TRAILER_ITEMS_PER_CATEGORY]:
                external_id = payload.get("id")
                if external_id is None:
                    continue
                targets.append((listing.definition.kind, str(external_id)))

        results = await asyncio.gather(
            *(tmdb.fetch_trailer_url(external_id, kind) for kind, external_id in targets),
            return_exceptions=True,
        )
        trailers: dict[tuple[str, str], str] = {}
        for (kind, external_id), result in zip(targets, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(
                    "Trailer lookup failed for %s %s: %s", kind, external_id, result
                )
                continue
            if result:
                trailers[(kind, external_id)] = result
        return trailers

    async def _try_store(self, query: ListingQuery) -> StageOutcome:
        if self._store is None:
            return StageOutcome.fall_through("database not configured")
        if not await self._store.is_ready():
            return StageOutcome.fall_through("database not reachable")

        filters = StoreFilter(
            search=query.search,
            category=query.category,
            type=query.type,
            featured=query.featured,
        )
        try:
            documents = await self._store.find(filters, limit=self._listing_limit(query))
        except StoreUnavailableError as exc:
            return StageOutcome.fall_through(str(exc))
        self._health.record_success()
        return StageOutcome.served(
            "db", [normalize(document) for document in documents]
        )

    def _use_seed(self, query: ListingQuery) -> StageOutcome:
        search = query.search.lower()
        matches = [
            record
            for record in self._seed_catalog
            if (not query.type or record.type == query.type)
            and (not query.category or record.category == query.category)
            and (not search or search in record.title.lower())
            and (query.featured is None or record.featured == query.featured)
        ]
        limited = matches[: self._listing_limit(query)]
        return StageOutcome.served("seed", [normalize(record) for record in limited])


def _raise_first_failure(results: Sequence[Any], labels: Sequence[str]) -> list[Any]:
    """Return settled ``gather`` results, re-raising the first failure."""

    for label, result in zip(labels, results):
        if isinstance(result, UpstreamError):
            raise result
        if isinstance(result, Exception):
            raise UpstreamError(f"TMDB fetch for {label} failed") from result
        if isinstance(result, BaseException):
            raise result
    return list(results)

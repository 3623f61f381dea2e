"""Entry point for the FastAPI-powered catalog service."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings, settings
from .database import Database
from .models import CONTENT_TYPES, ListingQuery, MovieCreate, MovieUpdate
from .services.aggregator import CatalogAggregator
from .services.catalog_store import (
    CatalogStore,
    StoreUnavailableError,
    parse_document_id,
)
from .services.health import UpstreamHealthTracker
from .services.normalization import normalize_store_document
from .services.tmdb import TMDBClient, UpstreamError, UpstreamNotConfiguredError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app: FastAPI


def build_health_tracker(config: Settings) -> UpstreamHealthTracker:
    return UpstreamHealthTracker(
        cooldown_seconds=config.tmdb_cooldown_seconds,
        failure_threshold=config.tmdb_failure_threshold,
    )


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    exit_stack = AsyncExitStack()
    tmdb: TMDBClient | None = None
    if settings.tmdb_enabled:
        tmdb_http_client = await exit_stack.enter_async_context(
            httpx.AsyncClient(
                base_url=str(settings.tmdb_api_url),
                timeout=httpx.Timeout(settings.tmdb_timeout_seconds, connect=5.0),
            )
        )
        tmdb = TMDBClient(settings, tmdb_http_client)
    else:
        logger.warning("TMDB_API_KEY is not set; serving database/seed data only.")

    database: Database | None = None
    store: CatalogStore | None = None
    if settings.store_enabled and settings.database_url:
        database = Database(settings.database_url)
        try:
            await database.create_all()
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("Database unavailable at startup: %s", exc)
        store = CatalogStore(database)
    else:
        logger.warning("DATABASE_URL is not set; skipping database connection.")

    fastapi_app.state.catalog_store = store
    fastapi_app.state.aggregator = CatalogAggregator(
        settings,
        tmdb=tmdb,
        store=store,
        health=build_health_tracker(settings),
    )

    try:
        yield
    finally:  # pragma: no cover - teardown path exercised at runtime
        if database is not None:
            await database.dispose()
        await exit_stack.aclose()


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        description="Catalog browsing API backed by TMDB with local fallbacks",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Catalog-Source"],
    )

    register_routes(fastapi_app)
    return fastapi_app


def get_aggregator(fastapi_app: FastAPI) -> CatalogAggregator:
    aggregator = getattr(fastapi_app.state, "aggregator", None)
    if not isinstance(aggregator, CatalogAggregator):
        raise RuntimeError("Catalog aggregator not initialised")
    return aggregator


def get_catalog_store(fastapi_app: FastAPI) -> CatalogStore:
    store = getattr(fastapi_app.state, "catalog_store", None)
    if not isinstance(store, CatalogStore):
        raise HTTPException(status_code=503, detail="Catalog database is not configured.")
    return store


def _document_id_or_400(raw_id: str) -> int:
    document_id = parse_document_id(raw_id)
    if document_id is None:
        raise HTTPException(status_code=400, detail="Invalid movie id.")
    return document_id


def register_routes(fastapi_app: FastAPI) -> None:
    @fastapi_app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [str(error.get("msg", "")) for error in exc.errors()]
        return JSONResponse(
            status_code=400,
            content={"detail": "Validation failed", "details": details},
        )

    @fastapi_app.get("/healthz")
    async def healthcheck() -> dict[str, Any]:
        aggregator = get_aggregator(fastapi_app)
        tracker = aggregator.health
        upstream = tracker.snapshot().to_payload(now=tracker.now())
        return {
            "status": "ok",
            "upstream": {"configured": aggregator.upstream_configured, **upstream},
            "store": {
                "configured": aggregator.store_configured,
                "ready": await aggregator.store_ready(),
            },
        }

    @fastapi_app.get("/movies")
    async def list_movies(request: Request) -> JSONResponse:
        aggregator = get_aggregator(fastapi_app)
        query = ListingQuery.from_query(request.query_params)
        result = await aggregator.list_content(query)
        return JSONResponse(
            result.to_payload(), headers={"X-Catalog-Source": result.source}
        )

    @fastapi_app.get("/movies/tmdb-trailer/{content_type}/{external_id}")
    async def tmdb_trailer(content_type: str, external_id: str) -> dict[str, Any]:
        if content_type not in CONTENT_TYPES or not external_id.strip():
            raise HTTPException(
                status_code=400, detail="Valid type and id are required."
            )
        aggregator = get_aggregator(fastapi_app)
        try:
            trailer_url = await aggregator.resolve_trailer(
                content_type,  # type: ignore[arg-type]
                external_id.strip(),
            )
        except UpstreamNotConfiguredError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        except UpstreamError as exc:
            raise HTTPException(
                status_code=502, detail="TMDB trailer lookup failed."
            ) from exc
        if not trailer_url:
            raise HTTPException(
                status_code=404, detail="Trailer not available for this title."
            )
        return {"data": {"trailerUrl": trailer_url}}

    @fastapi_app.get("/movies/{movie_id}")
    async def get_movie(movie_id: str) -> dict[str, Any]:
        document_id = _document_id_or_400(movie_id)
        store = get_catalog_store(fastapi_app)
        try:
            document = await store.get(document_id)
        except StoreUnavailableError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        if document is None:
            raise HTTPException(status_code=404, detail="Movie not found")
        return {"data": normalize_store_document(document).to_payload()}

    @fastapi_app.post("/movies", status_code=201)
    async def create_movie(payload: MovieCreate) -> dict[str, Any]:
        store = get_catalog_store(fastapi_app)
        try:
            document = await store.create(payload.model_dump())
        except StoreUnavailableError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return {
            "message": "Movie created",
            "data": normalize_store_document(document).to_payload(),
        }

    @fastapi_app.put("/movies/{movie_id}")
    async def update_movie(movie_id: str, payload: MovieUpdate) -> dict[str, Any]:
        document_id = _document_id_or_400(movie_id)
        store = get_catalog_store(fastapi_app)
        try:
            document = await store.update(document_id, payload.changes())
        except StoreUnavailableError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        if document is None:
            raise HTTPException(status_code=404, detail="Movie not found")
        return {
            "message": "Movie updated",
            "data": normalize_store_document(document).to_payload(),
        }

    @fastapi_app.delete("/movies/{movie_id}")
    async def delete_movie(movie_id: str) -> dict[str, str]:
        document_id = _document_id_or_400(movie_id)
        store = get_catalog_store(fastapi_app)
        try:
            deleted = await store.delete(document_id)
        except StoreUnavailableError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        if not deleted:
            raise HTTPException(status_code=404, detail="Movie not found")
        return {"message": "Movie deleted"}


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.environment == "development",
    )

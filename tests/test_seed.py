"""Tests for loading the bundled catalog into the store."""

from __future__ import annotations

import asyncio

import pytest

from app.database import Database
from app.seed import seed_database
from app.seed_catalog import SEED_CATALOG
from app.services.catalog_store import CatalogStore, StoreFilter
from conftest import build_settings


def _stored_titles(url: str) -> list[str]:
    async def runner() -> list[str]:
        database = Database(url)
        try:
            documents = await CatalogStore(database).find(StoreFilter(), limit=500)
        finally:
            await database.dispose()
        return [document.title for document in documents]

    return asyncio.run(runner())


def test_seed_database_replaces_existing_documents(tmp_path) -> None:
    url = f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"
    settings = build_settings(DATABASE_URL=url)

    first = asyncio.run(seed_database(settings))
    second = asyncio.run(seed_database(settings))

    assert first == second == len(SEED_CATALOG)
    assert _stored_titles(url) == [record.title for record in SEED_CATALOG]


def test_seed_database_requires_url() -> None:
    with pytest.raises(RuntimeError):
        asyncio.run(seed_database(build_settings(DATABASE_URL="")))


def test_cli_seed_command(tmp_path, monkeypatch) -> None:
    from flixcatalog import __main__ as cli

    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setattr(cli, "settings", build_settings(DATABASE_URL=url))

    cli.main(["seed"])

    assert len(_stored_titles(url)) == len(SEED_CATALOG)

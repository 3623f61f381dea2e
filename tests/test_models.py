"""Tests for the catalog payload models."""

from __future__ import annotations

import pytest

from app.models import ContentRecord, ListingQuery, ListingResult, MovieCreate, MovieUpdate


def test_unknown_content_type_defaults_to_movie() -> None:
    record = ContentRecord(id="seed-x", title="X", year=2000, type="documentary")

    assert record.type == "movie"


def test_content_record_payload_uses_camel_case() -> None:
    record = ContentRecord(
        id="seed-x", title="X", year=2000, type="series", trailer_url=None
    )
    payload = record.to_payload()

    assert payload["trailerUrl"] == ""
    assert payload["type"] == "series"
    assert payload["createdAt"] is None
    assert "trailer_url" not in payload


def test_listing_query_parses_request_values() -> None:
    query = ListingQuery.from_query(
        {
            "search": "  dark ",
            "category": "Top Picks",
            "type": "series",
            "featured": "true",
            "limit": "5",
            "source": "DB",
            "perCategory": "3",
        }
    )

    assert query.search == "dark"
    assert query.category == "Top Picks"
    assert query.type == "series"
    assert query.featured is True
    assert query.limit == 5
    assert query.forces_store is True
    assert query.per_category == 3


@pytest.mark.parametrize("raw", ["", "yes", "1", "TRUEISH"])
def test_listing_query_ignores_non_boolean_featured(raw: str) -> None:
    assert ListingQuery.from_query({"featured": raw}).featured is None


@pytest.mark.parametrize("raw", ["", "abc", "0", "inf"])
def test_listing_query_invalid_limit_uses_default(raw: str) -> None:
    assert ListingQuery.from_query({"limit": raw}).limit is None


def test_empty_query_has_no_filters() -> None:
    query = ListingQuery.from_query({})

    assert query.search == ""
    assert query.featured is None
    assert query.limit is None
    assert query.forces_store is False


def test_listing_result_count_matches_data() -> None:
    records = [
        ContentRecord(id=f"seed-{index}", title=str(index), year=2000)
        for index in range(3)
    ]
    payload = ListingResult(source="seed", records=records).to_payload()

    assert payload["count"] == 3
    assert len(payload["data"]) == 3


def test_movie_create_accepts_camel_case_urls() -> None:
    payload = MovieCreate.model_validate(
        {
            "title": "Heat",
            "description": "A heist thriller.",
            "category": "Action Thrillers",
            "type": "movie",
            "year": 1995,
            "duration": "2h 50m",
            "imageUrl": "https://img.example.com/heat.jpg",
            "backdropUrl": "https://img.example.com/heat-wide.jpg",
            "trailerUrl": "https://www.youtube.com/embed/heat",
        }
    )

    dumped = payload.model_dump()
    assert dumped["image_url"] == "https://img.example.com/heat.jpg"
    assert dumped["rating"] == "U/A 13+"
    assert dumped["featured"] is False


def test_movie_update_only_reports_supplied_fields() -> None:
    update = MovieUpdate.model_validate({"featured": True, "imageUrl": "https://x/y.jpg"})

    assert update.changes() == {"featured": True, "image_url": "https://x/y.jpg"}

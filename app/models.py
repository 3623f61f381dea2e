"""Pydantic models and source shapes describing catalog payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, Mapping, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

ContentType = Literal["movie", "series"]
CONTENT_TYPES: frozenset[str] = frozenset({"movie", "series"})
CatalogSource = Literal["tmdb", "db", "seed"]


def coerce_content_type(value: object) -> ContentType:
    """Return ``value`` when it is a known content type, otherwise ``movie``."""

    if isinstance(value, str) and value.strip().lower() == "series":
        return "series"
    return "movie"


class ContentRecord(BaseModel):
    """Canonical catalog entry returned by every listing source."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str = ""
    category: str = ""
    type: ContentType = "movie"
    year: int
    rating: str = ""
    duration: str = ""
    image: str = ""
    backdrop: str = ""
    trailer_url: str = Field(default="", alias="trailerUrl")
    featured: bool = False
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, value: object) -> ContentType:
        return coerce_content_type(value)

    @field_validator("trailer_url", mode="before")
    @classmethod
    def _blank_trailer(cls, value: object) -> object:
        if value is None:
            return ""
        return value

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON representation used by the HTTP API."""

        return self.model_dump(mode="json", by_alias=True)


@dataclass(slots=True)
class UpstreamItem:
    """Raw listing entry returned by the upstream provider."""

    payload: Mapping[str, Any]
    kind: ContentType
    category: str


@dataclass(frozen=True, slots=True)
class StoreDocument:
    """Content document read from the persistent store."""

    id: int
    title: str
    description: str
    category: str
    type: str
    year: int
    rating: str
    duration: str
    image_url: str
    backdrop_url: str
    trailer_url: str
    featured: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: Any) -> "StoreDocument":
        return cls(
            id=row.id,
            title=row.title,
            description=row.description,
            category=row.category,
            type=row.type,
            year=row.year,
            rating=row.rating,
            duration=row.duration,
            image_url=row.image_url,
            backdrop_url=row.backdrop_url,
            trailer_url=row.trailer_url,
            featured=bool(row.featured),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


@dataclass(frozen=True, slots=True)
class SeedRecord:
    """Static catalog entry bundled with the application."""

    title: str
    description: str
    category: str
    type: ContentType
    year: int
    rating: str
    duration: str
    image_url: str
    backdrop_url: str
    trailer_url: str
    featured: bool = False

    def to_document_fields(self) -> dict[str, Any]:
        """Return the column values used when seeding the persistent store."""

        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "type": self.type,
            "year": self.year,
            "rating": self.rating,
            "duration": self.duration,
            "image_url": self.image_url,
            "backdrop_url": self.backdrop_url,
            "trailer_url": self.trailer_url,
            "featured": self.featured,
        }


SourceItem = Union[UpstreamItem, StoreDocument, SeedRecord]


class ListingQuery(BaseModel):
    """Normalized view of the listing query parameters."""

    search: str = ""
    category: str = ""
    type: str = ""
    featured: bool | None = None
    limit: int | None = None
    source: str | None = None
    per_category: int | None = Field(
        default=None,
        validation_alias=AliasChoices("perCategory", "per_category"),
    )

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "ListingQuery":
        return cls.model_validate(dict(params))

    @field_validator("search", "category", "type", mode="before")
    @classmethod
    def _strip_text(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("source", mode="before")
    @classmethod
    def _strip_source(cls, value: object) -> str | None:
        if value is None:
            return None
        cleaned = str(value).strip().lower()
        return cleaned or None

    @field_validator("featured", mode="before")
    @classmethod
    def _parse_featured(cls, value: object) -> bool | None:
        """Only the literal strings ``true`` and ``false`` select a flag."""

        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
        return None

    @field_validator("limit", "per_category", mode="before")
    @classmethod
    def _parse_optional_int(cls, value: object) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return int(value) or None
        if isinstance(value, str):
            try:
                parsed = int(float(value.strip()))
            except (ValueError, OverflowError):
                return None
            return parsed or None
        return None

    @property
    def forces_store(self) -> bool:
        return self.source == "db"


@dataclass(slots=True)
class ListingResult:
    """Records produced by exactly one catalog source."""

    source: CatalogSource
    records: list[ContentRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    def to_payload(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "data": [record.to_payload() for record in self.records],
        }


class MovieCreate(BaseModel):
    """Payload accepted when creating a stored catalog document."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1, max_length=120)
    type: ContentType = "movie"
    year: int = Field(ge=1900, le=2100)
    rating: str = Field(default="U/A 13+", min_length=1, max_length=32)
    duration: str = Field(min_length=1, max_length=64)
    image_url: str = Field(
        min_length=1, validation_alias=AliasChoices("imageUrl", "image_url", "image")
    )
    backdrop_url: str = Field(
        min_length=1,
        validation_alias=AliasChoices("backdropUrl", "backdrop_url", "backdrop"),
    )
    trailer_url: str = Field(
        min_length=1,
        validation_alias=AliasChoices("trailerUrl", "trailer_url"),
    )
    featured: bool = False


class MovieUpdate(BaseModel):
    """Partial payload accepted when updating a stored catalog document."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1, max_length=120)
    type: ContentType | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    rating: str | None = Field(default=None, min_length=1, max_length=32)
    duration: str | None = Field(default=None, min_length=1, max_length=64)
    image_url: str | None = Field(
        default=None,
        min_length=1,
        validation_alias=AliasChoices("imageUrl", "image_url", "image"),
    )
    backdrop_url: str | None = Field(
        default=None,
        min_length=1,
        validation_alias=AliasChoices("backdropUrl", "backdrop_url", "backdrop"),
    )
    trailer_url: str | None = Field(
        default=None,
        min_length=1,
        validation_alias=AliasChoices("trailerUrl", "trailer_url"),
    )
    featured: bool | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields supplied by the caller."""

        return self.model_dump(exclude_unset=True, exclude_none=True)

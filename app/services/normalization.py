"""Map every catalog source shape onto :class:`ContentRecord`."""

from __future__ import annotations

from typing import Any

from ..models import (
    ContentRecord,
    ContentType,
    SeedRecord,
    SourceItem,
    StoreDocument,
    UpstreamItem,
    coerce_content_type,
)
from ..utils import hyphenate_title, parse_year

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"
POSTER_SIZE = "w500"
POSTER_FALLBACK_SIZE = "w780"
BACKDROP_SIZE = "w1280"

UPSTREAM_PREFIX = "tmdb"
STORE_PREFIX = "db"
SEED_PREFIX = "seed"


def upstream_record_id(kind: ContentType, external_id: Any) -> str:
    return f"{UPSTREAM_PREFIX}-{kind}-{external_id}"


def store_record_id(document_id: int) -> str:
    return f"{STORE_PREFIX}-{document_id}"


def seed_record_id(title: str) -> str:
    return f"{SEED_PREFIX}-{hyphenate_title(title)}"


def _image_url(path: object, size: str, image_base: str) -> str:
    if not isinstance(path, str) or not path:
        return ""
    if path.startswith("http"):
        return path
    return f"{image_base}/{size}{path}"


def normalize_upstream_item(
    item: UpstreamItem,
    *,
    trailer_url: str = "",
    featured: bool = False,
    image_base: str = TMDB_IMAGE_BASE,
) -> ContentRecord:
    payload = item.payload
    kind = coerce_content_type(item.kind)
    title = payload.get("title") or payload.get("name") or "Untitled"
    release = payload.get("release_date") or payload.get("first_air_date") or ""
    image = _image_url(payload.get("poster_path"), POSTER_SIZE, image_base) or _image_url(
        payload.get("backdrop_path"), POSTER_FALLBACK_SIZE, image_base
    )
    backdrop = _image_url(payload.get("backdrop_path"), BACKDROP_SIZE, image_base) or image
    return ContentRecord(
        id=upstream_record_id(kind, payload.get("id")),
        title=str(title),
        description=str(payload.get("overview") or "No description available."),
        category=item.category,
        type=kind,
        year=parse_year(release),
        rating="18+" if payload.get("adult") else "13+",
        duration="Series" if kind == "series" else "Movie",
        image=image,
        backdrop=backdrop,
        trailer_url=trailer_url or "",
        featured=featured,
    )


def normalize_store_document(document: StoreDocument) -> ContentRecord:
    return ContentRecord(
        id=store_record_id(document.id),
        title=document.title,
        description=document.description or "",
        category=document.category or "",
        type=document.type,
        year=document.year,
        rating=document.rating or "",
        duration=document.duration or "",
        image=document.image_url or "",
        backdrop=document.backdrop_url or document.image_url or "",
        trailer_url=document.trailer_url or "",
        featured=bool(document.featured),
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


def normalize_seed_record(record: SeedRecord) -> ContentRecord:
    return ContentRecord(
        id=seed_record_id(record.title),
        title=record.title,
        description=record.description,
        category=record.category,
        type=record.type,
        year=record.year,
        rating=record.rating,
        duration=record.duration,
        image=record.image_url,
        backdrop=record.backdrop_url or record.image_url,
        trailer_url=record.trailer_url,
        featured=record.featured,
    )


def normalize(item: SourceItem) -> ContentRecord:
    """Normalize any supported source shape."""

    if isinstance(item, UpstreamItem):
        return normalize_upstream_item(item)
    if isinstance(item, StoreDocument):
        return normalize_store_document(item)
    if isinstance(item, SeedRecord):
        return normalize_seed_record(item)
    raise TypeError(f"Unsupported catalog source item: {type(item).__name__}")

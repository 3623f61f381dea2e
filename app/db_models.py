"""SQLAlchemy ORM models backing the persistent catalog."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


class Movie(Base):
    """A catalog document managed through the CRUD endpoints."""

    __tablename__ = "movies"
    __table_args__ = (Index("ix_movies_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    category: Mapped[str] = mapped_column(String(120), index=True)
    type: Mapped[str] = mapped_column(String(16), default="movie")
    year: Mapped[int] = mapped_column(Integer)
    rating: Mapped[str] = mapped_column(String(32), default="U/A 13+")
    duration: Mapped[str] = mapped_column(String(64))
    image_url: Mapped[str] = mapped_column(String(512))
    backdrop_url: Mapped[str] = mapped_column(String(512))
    trailer_url: Mapped[str] = mapped_column(String(512))
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

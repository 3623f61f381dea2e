"""Installable alias for the catalog service application."""

from __future__ import annotations

from app import app, create_app

__version__ = "1.0.0"

__all__ = ["__version__", "app", "create_app"]

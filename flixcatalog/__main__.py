"""Command line entry point for ``python -m flixcatalog``."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Sequence

import uvicorn

from app.config import settings
from app.seed import seed_database


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the API, or load the seed catalog with ``seed``."""

    parser = argparse.ArgumentParser(prog="flixcatalog")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("serve", "seed"),
        default="serve",
        help="serve the API (default) or seed the catalog database",
    )
    args = parser.parse_args(argv)

    if args.command == "seed":
        logging.basicConfig(level=logging.INFO)
        asyncio.run(seed_database(settings))
        return

    uvicorn.run(
        "app.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":  # pragma: no cover - runtime entrypoint
    main()

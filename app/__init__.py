"""FlixCatalog FastAPI application package."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "app": "app.main",
    "create_app": "app.main",
    "get_settings": "app.config",
}

__all__ = list(_EXPORTS)


def __getattr__(name: str) -> Any:
    # Resolve lazily so importing ``app.config`` does not build the ASGI app.
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module 'app' has no attribute {name}")
    return getattr(import_module(module_name), name)

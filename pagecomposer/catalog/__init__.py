"""Snippet catalog models and loaders."""

from .lib import (
    Catalog,
    CatalogError,
    CatalogItem,
    default_catalog,
    load_catalog,
    parse_catalog,
)

__all__ = [
    "Catalog",
    "CatalogItem",
    "CatalogError",
    "load_catalog",
    "parse_catalog",
    "default_catalog",
]

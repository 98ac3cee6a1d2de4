"""Cliente do catálogo de entidades."""

from app.infra.catalog.client import (
    CATALOG_FETCH_ERROR,
    CATALOG_NOT_FOUND_ERROR,
    CatalogClient,
)

__all__ = ["CATALOG_FETCH_ERROR", "CATALOG_NOT_FOUND_ERROR", "CatalogClient"]

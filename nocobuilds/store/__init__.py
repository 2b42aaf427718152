"""In-memory stores for the directory catalogue."""

from nocobuilds.store.catalogue import CatalogueStore

__all__ = ["CatalogueStore"]

"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import SkinFetcher
from .persistence import CatalogStore

__all__ = ["CatalogStore", "SkinFetcher"]

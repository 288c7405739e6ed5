"""Ports for persisting per-locale catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from skinsync.config.catalog import LocaleTarget
    from skinsync.domain.model import SkinItem


@runtime_checkable
class CatalogStore(Protocol):
    """Load and overwrite the catalog document of a locale."""

    def load(self, target: LocaleTarget) -> list[SkinItem]:
        """Return the persisted items, or an empty list if none were written yet."""
        ...

    def save(self, target: LocaleTarget, items: Sequence[SkinItem]) -> Path:
        """Replace the persisted items and return where they were written."""
        ...


__all__ = ["CatalogStore"]

"""Ports for fetching upstream skin data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skinsync.domain.model import RawSkin


@runtime_checkable
class SkinFetcher(Protocol):
    """Callable port returning every upstream skin record for one locale."""

    def __call__(self, locale: str) -> Sequence[RawSkin]: ...


__all__ = ["SkinFetcher"]

"""Deterministic ordering of catalog items."""

from __future__ import annotations

import math
import unicodedata
from enum import IntEnum
from typing import TYPE_CHECKING, TypeAlias

from skinsync.domain.identity import paint_index_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from skinsync.domain.model import SkinItem

SkinSortKey: TypeAlias = tuple[str, tuple[int, float], str, tuple[str, str, str]]


class PaintRank(IntEnum):
    """Bucket of a paint index: missing, numeric, then free text."""

    MISSING = 0
    NUMERIC = 1
    TEXT = 2


def numeric_paint_index(value: str) -> float | None:
    """Parse a paint index as a finite ASCII decimal number, or ``None``."""

    if not value.isascii() or "_" in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def collation_key(text: str) -> tuple[str, str, str]:
    """Locale-style comparison key: base letters, then accents, then case.

    Lowercase sorts before uppercase at the last level, the way ICU's
    default collation orders them.
    """

    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return (base.casefold(), decomposed.casefold(), text.swapcase())


def _paint_key(paint_index: str | None) -> tuple[int, float]:
    if paint_index is None:
        return (PaintRank.MISSING, 0.0)
    number = numeric_paint_index(paint_index)
    if number is None:
        return (PaintRank.TEXT, 0.0)
    return (PaintRank.NUMERIC, number)


def skin_sort_key(item: SkinItem) -> SkinSortKey:
    weapon_id = "" if item.weapon.id is None else paint_index_text(item.weapon.id)
    return (
        weapon_id,
        _paint_key(item.paint_index),
        item.paint_index or "",
        collation_key(item.name or ""),
    )


def sort_skins(items: Iterable[SkinItem]) -> list[SkinItem]:
    """Return a new list ordered by weapon, paint index and display name."""

    return sorted(items, key=skin_sort_key)

"""Reshape upstream records into the canonical catalog shape."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Final

from skinsync.domain.identity import NO_PAINT_TOKEN, paint_index_text
from skinsync.domain.model import SkinItem, Weapon

if TYPE_CHECKING:
    from skinsync.domain.model import PaintIndex, RawSkin

LEGACY_MODEL_FIELD: Final[str] = "legacy_model"


def normalize_paint_index(value: PaintIndex | None) -> str | None:
    """Collapse blank and ``"null"`` paint indices to ``None``; stringify the rest."""

    if value is None or value in ("", NO_PAINT_TOKEN):
        return None
    return paint_index_text(value)


def _identifier_text(value: object) -> str | None:
    if isinstance(value, bool) or not isinstance(value, str | int):
        return None
    return str(value)


def normalize_skin(raw: RawSkin) -> SkinItem:
    """Return a canonical copy of ``raw`` sharing no mutable state with it."""

    weapon = raw.weapon or Weapon()
    attributes = {
        key: copy.deepcopy(value)
        for key, value in raw.attributes.items()
        if key != LEGACY_MODEL_FIELD
    }
    return SkinItem(
        id=_identifier_text(raw.id),
        name=raw.name,
        weapon=Weapon(id=weapon.id, name=weapon.name),
        paint_index=normalize_paint_index(raw.paint_index),
        attributes=attributes,
        field_order=tuple(key for key in raw.field_order if key != LEGACY_MODEL_FIELD),
    )

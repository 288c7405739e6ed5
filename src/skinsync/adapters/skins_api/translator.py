"""Translate upstream skin payloads into domain records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from skinsync.domain.model import RawSkin, Weapon

from .schema import SkinPayload, SkinPayloadInput


class InvalidSkinPayloadError(ValueError):
    """Raised when a document is not a JSON array of objects."""


def parse_skin(payload: SkinPayloadInput) -> RawSkin:
    model = SkinPayload.model_validate(payload)
    weapon = None
    if model.weapon is not None:
        weapon = Weapon(id=model.weapon.id, name=model.weapon.name)
    return RawSkin(
        id=model.id,
        name=model.name,
        weapon=weapon,
        paint_index=model.paint_index,
        attributes=dict(model.model_extra or {}),
        field_order=tuple(payload.keys()),
    )


def parse_skin_list(payload: object) -> list[RawSkin]:
    """Parse a decoded JSON document holding an array of skin objects."""

    if not isinstance(payload, list):
        raise InvalidSkinPayloadError(
            f"Expected a JSON array of skins, got {type(payload).__name__}"
        )
    skins: list[RawSkin] = []
    for position, entry in enumerate(cast(list[object], payload)):
        if not isinstance(entry, Mapping):
            raise InvalidSkinPayloadError(
                f"Expected a JSON object at position {position}, got {type(entry).__name__}"
            )
        skins.append(parse_skin(cast(SkinPayloadInput, entry)))
    return skins

"""Pydantic models describing the upstream skins payload."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, JsonValue, field_validator


def _mapping_or_none(value: object) -> object:
    return value if isinstance(value, Mapping) else None


class WeaponPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | int | float | None = None
    name: JsonValue = None

    @field_validator("id", mode="before")
    @classmethod
    def _scalar_id_or_none(cls, value: object) -> object:
        if isinstance(value, bool) or not isinstance(value, str | int | float):
            return None
        return value


class SkinPayload(BaseModel):
    """A skin record; only the fields the catalog reads are typed.

    The upstream ``id`` is always replaced during reconciliation, so any JSON
    value is accepted for it. Any other field is kept verbatim in
    ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    id: JsonValue = None
    name: str | None = None
    weapon: WeaponPayload | None = None
    paint_index: str | int | float | None = None

    _normalize_weapon = field_validator("weapon", mode="before")(_mapping_or_none)


SkinPayloadInput = Mapping[str, object]

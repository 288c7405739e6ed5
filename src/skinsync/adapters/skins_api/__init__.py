"""Public interface for the upstream skins API adapter."""

from __future__ import annotations

from .client import SkinsApiClient, SkinsApiError
from .schema import SkinPayload, SkinPayloadInput, WeaponPayload
from .translator import InvalidSkinPayloadError, parse_skin, parse_skin_list

__all__ = [
    "InvalidSkinPayloadError",
    "SkinPayload",
    "SkinPayloadInput",
    "SkinsApiClient",
    "SkinsApiError",
    "WeaponPayload",
    "parse_skin",
    "parse_skin_list",
]

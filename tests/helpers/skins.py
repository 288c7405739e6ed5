"""Reusable payload builders and fakes for catalog tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from skinsync.adapters.json_catalog import render_catalog
from skinsync.adapters.skins_api import parse_skin
from skinsync.domain.model import SkinItem, Weapon

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from skinsync.config.catalog import LocaleTarget
    from skinsync.domain.model import RawSkin

_MISSING = object()


def make_payload(
    weapon_id: object = "weapon_ak47",
    paint_index: object = 44,
    name: str | None = "AK-47 | Case Hardened",
    *,
    skin_id: object = _MISSING,
    **extra: object,
) -> dict[str, object]:
    """Build an upstream-shaped skin record."""

    payload: dict[str, object] = {}
    if skin_id is not _MISSING:
        payload["id"] = skin_id
    payload["name"] = name
    payload["weapon"] = {"id": weapon_id, "weapon_id": 7, "name": "AK-47"}
    payload["paint_index"] = paint_index
    payload.update(extra)
    return payload


def make_raw_skin(
    weapon_id: object = "weapon_ak47",
    paint_index: object = 44,
    name: str | None = "AK-47 | Case Hardened",
    **extra: object,
) -> RawSkin:
    return parse_skin(make_payload(weapon_id, paint_index, name, **extra))


def make_skin_item(
    weapon_id: str | None = "weapon_ak47",
    paint_index: str | None = "44",
    name: str | None = "AK-47 | Case Hardened",
    *,
    skin_id: str | None = None,
) -> SkinItem:
    return SkinItem(
        id=skin_id,
        name=name,
        weapon=Weapon(id=weapon_id, name=None),
        paint_index=paint_index,
    )


class FakeSkinFetcher:
    """In-memory upstream returning canned payloads per locale."""

    def __init__(
        self,
        payloads: Mapping[str, Sequence[Mapping[str, object]]],
        *,
        failures: Mapping[str, Exception] | None = None,
    ) -> None:
        self.payloads = payloads
        self.failures = dict(failures or {})
        self.calls: list[str] = []

    def __call__(self, locale: str) -> list[RawSkin]:
        self.calls.append(locale)
        if locale in self.failures:
            raise self.failures[locale]
        return [parse_skin(payload) for payload in self.payloads.get(locale, ())]


class MemoryCatalogStore:
    """Catalog store keeping rendered documents in memory."""

    def __init__(self, reference: Mapping[str, Sequence[SkinItem]] | None = None) -> None:
        self.loaded: dict[str, list[SkinItem]] = {
            code: list(items) for code, items in (reference or {}).items()
        }
        self.saved: dict[str, list[SkinItem]] = {}
        self.rendered: dict[str, str] = {}
        self.load_calls: list[str] = []

    def load(self, target: LocaleTarget) -> list[SkinItem]:
        self.load_calls.append(target.code)
        return list(self.loaded.get(target.code, []))

    def save(self, target: LocaleTarget, items: Sequence[SkinItem]) -> Path:
        self.saved[target.code] = list(items)
        self.rendered[target.code] = render_catalog(items)
        return Path("memory") / target.filename

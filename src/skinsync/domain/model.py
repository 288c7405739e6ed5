"""Skin catalog entities.

``RawSkin`` is the upstream contract: only the fields the catalog reads are
typed, everything else rides along in ``attributes``. ``SkinItem`` is the
canonical, reconciled shape that gets persisted per locale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final, TypeAlias

from skinsync.domain.identity import build_identity_key

WeaponId: TypeAlias = str | int | float
PaintIndex: TypeAlias = str | int | float

_CORE_FIELDS: Final[tuple[str, ...]] = ("id", "name", "weapon", "paint_index")


@dataclass(slots=True)
class Weapon:
    id: WeaponId | None = None
    name: object = None

    def to_document(self) -> dict[str, object]:
        return {"id": self.id, "name": self.name}


@dataclass(slots=True, kw_only=True)
class RawSkin:
    """One upstream record as received.

    ``field_order`` remembers the upstream key order so the persisted catalog
    stays diff-friendly.
    """

    id: object = None
    name: str | None = None
    weapon: Weapon | None = None
    paint_index: PaintIndex | None = None
    attributes: dict[str, Any] = field(default_factory=dict[str, Any])
    field_order: tuple[str, ...] = ()


@dataclass(slots=True, kw_only=True)
class SkinItem:
    """Canonical catalog entry with a stable ``id``."""

    weapon: Weapon
    paint_index: str | None
    id: str | None = None
    name: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict[str, Any])
    field_order: tuple[str, ...] = ()

    @property
    def identity_key(self) -> str:
        return build_identity_key(self.weapon.id, self.paint_index)

    def to_document(self) -> dict[str, object]:
        """Render the item as a JSON-ready mapping in upstream key order."""

        document: dict[str, object] = {}
        for key in self.field_order:
            if key in _CORE_FIELDS:
                document[key] = self._core_value(key)
            elif key in self.attributes:
                document[key] = self.attributes[key]

        for key, value in self.attributes.items():
            document.setdefault(key, value)
        if self.name is not None:
            document.setdefault("name", self.name)
        for key in ("weapon", "paint_index", "id"):
            if key not in document:
                document[key] = self._core_value(key)
        return document

    def _core_value(self, key: str) -> object:
        if key == "weapon":
            return self.weapon.to_document()
        if key == "paint_index":
            return self.paint_index
        if key == "id":
            return self.id
        return self.name

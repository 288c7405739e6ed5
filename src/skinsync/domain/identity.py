"""Identity keys and the identifier index seeded from the reference catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from skinsync.domain.model import PaintIndex, SkinItem, WeaponId

log = getLogger(__name__)

KEY_SEPARATOR: Final[str] = "::"
NO_PAINT_TOKEN: Final[str] = "null"

IdentityKey: TypeAlias = str


def paint_index_text(value: PaintIndex | WeaponId) -> str:
    """String form of a paint index or weapon id; integral floats drop the fraction."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _escape(component: str) -> str:
    # A ":" inside a component is always escaped, so the bare separator only
    # ever appears between the two components.
    return component.replace("\\", "\\\\").replace(":", "\\:")


def build_identity_key(weapon_id: WeaponId | None, paint_index: PaintIndex | None) -> IdentityKey:
    """Compose the ``weapon::paint`` key identifying one conceptual item.

    >>> build_identity_key("w1", 3)
    'w1::3'
    >>> build_identity_key(None, None)
    '::null'
    """

    weapon_part = "" if weapon_id is None or weapon_id == "" else paint_index_text(weapon_id)
    paint_part = NO_PAINT_TOKEN if paint_index is None else paint_index_text(paint_index)
    return f"{_escape(weapon_part)}{KEY_SEPARATOR}{_escape(paint_part)}"


def numeric_segments(value: str) -> Iterator[int]:
    """Yield every maximal run of ASCII digits in ``value`` as an integer."""

    run: list[str] = []
    for char in value:
        if "0" <= char <= "9":
            run.append(char)
            continue
        if run:
            yield int("".join(run))
            run.clear()
    if run:
        yield int("".join(run))


def highest_numeric_segment(identifiers: Iterable[str | None]) -> int:
    highest = 0
    for identifier in identifiers:
        if identifier is None:
            continue
        for segment in numeric_segments(identifier):
            highest = max(highest, segment)
    return highest


@dataclass(slots=True)
class IdentitySeed:
    """Key-to-identifier index and high-water mark read from a catalog."""

    index: dict[IdentityKey, str] = field(default_factory=dict[IdentityKey, str])
    high_water_mark: int = 0


def build_identity_index(items: Iterable[SkinItem]) -> IdentitySeed:
    """Index every identified item by key and find the largest embedded number.

    Items without an ``id`` take no slot in the index. When a key occurs
    twice, the later item wins.
    """

    seed = IdentitySeed()
    identifiers: list[str | None] = []
    for item in items:
        identifiers.append(item.id)
        if not item.id:
            continue
        key = item.identity_key
        previous = seed.index.get(key)
        if previous is not None and previous != item.id:
            log.warning(
                "Identity key %s maps to both %s and %s; keeping %s",
                key,
                previous,
                item.id,
                item.id,
            )
        seed.index[key] = item.id

    seed.high_water_mark = highest_numeric_segment(identifiers)
    return seed

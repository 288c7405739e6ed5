"""Assign stable identifiers to canonical items."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from skinsync.domain.identity import IdentityKey, build_identity_index

if TYPE_CHECKING:
    from collections.abc import Iterable

    from skinsync.domain.model import SkinItem

log = getLogger(__name__)

DEFAULT_ID_PREFIX: Final[str] = "skin-"


@dataclass(slots=True)
class ReconciliationContext:
    """Identifier index and high-water mark shared by every locale of one run.

    The context is built once from the reference catalog and then mutated as
    items are reconciled, so a key first seen in any locale keeps the same
    identifier for the rest of the run. It is not safe to share between
    concurrently running locales.
    """

    index: dict[IdentityKey, str] = field(default_factory=dict[IdentityKey, str])
    high_water_mark: int = 0
    id_prefix: str = DEFAULT_ID_PREFIX
    allocated: list[str] = field(default_factory=list[str])

    @classmethod
    def from_reference(
        cls,
        items: Iterable[SkinItem],
        *,
        id_prefix: str = DEFAULT_ID_PREFIX,
    ) -> ReconciliationContext:
        seed = build_identity_index(items)
        return cls(index=seed.index, high_water_mark=seed.high_water_mark, id_prefix=id_prefix)

    def reconcile(self, item: SkinItem) -> SkinItem:
        """Set ``item.id`` from the index, allocating a new identifier if unseen."""

        key = item.identity_key
        existing = self.index.get(key)
        if existing is not None:
            item.id = existing
            return item

        self.high_water_mark += 1
        new_id = f"{self.id_prefix}{self.high_water_mark}"
        self.index[key] = new_id
        self.allocated.append(new_id)
        log.debug("Allocated %s for %s", new_id, key)
        item.id = new_id
        return item

    def reconcile_all(self, items: Iterable[SkinItem]) -> list[SkinItem]:
        return [self.reconcile(item) for item in items]

"""Application service synchronising every configured locale catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from skinsync.domain.normalization import normalize_skin
from skinsync.domain.ordering import sort_skins
from skinsync.domain.reconciliation import ReconciliationContext

if TYPE_CHECKING:
    from pathlib import Path

    from skinsync.config.catalog import CatalogConfig, LocaleTarget
    from skinsync.domain.ports import CatalogStore, SkinFetcher

log = getLogger(__name__)


@dataclass(slots=True)
class LocaleSyncResult:
    """Outcome of synchronising a single locale."""

    locale: str
    fetched: int
    reused: int
    allocated: int
    path: Path


@dataclass(slots=True)
class SyncCatalogsResult:
    """Outcome of a full run across all locales."""

    seed_high_water_mark: int
    high_water_mark: int
    locales: list[LocaleSyncResult] = field(default_factory=list[LocaleSyncResult])

    @property
    def allocated(self) -> int:
        return sum(result.allocated for result in self.locales)


def sync_skin_catalogs(
    *,
    fetcher: SkinFetcher,
    store: CatalogStore,
    catalog: CatalogConfig,
) -> SyncCatalogsResult:
    """Fetch, reconcile and persist every locale in configured order.

    Identifiers are seeded from the reference locale's persisted catalog. The
    first failing locale aborts the run; catalogs already written stay on disk.
    """

    reference_items = store.load(catalog.reference)
    context = ReconciliationContext.from_reference(reference_items, id_prefix=catalog.id_prefix)
    result = SyncCatalogsResult(
        seed_high_water_mark=context.high_water_mark,
        high_water_mark=context.high_water_mark,
    )
    log.info(
        "Starting skins sync: locales=%s, reference=%s, known=%s, high_water_mark=%s",
        ",".join(target.code for target in catalog.locales),
        catalog.reference_locale,
        len(context.index),
        context.high_water_mark,
    )

    for target in catalog.locales:
        locale_result = _sync_locale(target, fetcher=fetcher, store=store, context=context)
        result.locales.append(locale_result)

    result.high_water_mark = context.high_water_mark
    return result


def _sync_locale(
    target: LocaleTarget,
    *,
    fetcher: SkinFetcher,
    store: CatalogStore,
    context: ReconciliationContext,
) -> LocaleSyncResult:
    raw_items = fetcher(target.code)
    allocated_before = len(context.allocated)

    reconciled = context.reconcile_all(normalize_skin(raw) for raw in raw_items)
    path = store.save(target, sort_skins(reconciled))

    allocated = len(context.allocated) - allocated_before
    locale_result = LocaleSyncResult(
        locale=target.code,
        fetched=len(reconciled),
        reused=len(reconciled) - allocated,
        allocated=allocated,
        path=path,
    )
    log.info(
        "Synced %s: fetched=%s, reused=%s, allocated=%s, path=%s",
        target.code,
        locale_result.fetched,
        locale_result.reused,
        locale_result.allocated,
        path,
    )
    return locale_result

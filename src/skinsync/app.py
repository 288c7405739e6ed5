"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from skinsync.adapters.json_catalog import JsonCatalogStore
from skinsync.adapters.skins_api import SkinsApiClient
from skinsync.config import get_catalog_config, get_skins_api_config, get_storage_config
from skinsync.domain.catalog_sync import SyncCatalogsResult, sync_skin_catalogs

if TYPE_CHECKING:
    from skinsync.config import CatalogConfig, SkinsApiConfig, StorageConfig
    from skinsync.domain.ports import CatalogStore, SkinFetcher


log = getLogger(__name__)


def sync_skins(
    *,
    fetcher: SkinFetcher | None = None,
    store: CatalogStore | None = None,
    catalog: CatalogConfig | None = None,
    api: SkinsApiConfig | None = None,
    storage: StorageConfig | None = None,
) -> SyncCatalogsResult:
    """Synchronise every locale catalog using the configured adapters."""

    effective_catalog = catalog or get_catalog_config()
    effective_fetcher = fetcher or SkinsApiClient(config=api or get_skins_api_config())
    effective_store = store or JsonCatalogStore(storage=storage or get_storage_config())

    result = sync_skin_catalogs(
        fetcher=effective_fetcher,
        store=effective_store,
        catalog=effective_catalog,
    )

    log.info(
        "Finished skins sync: locales=%s, allocated=%s, high_water_mark=%s->%s",
        len(result.locales),
        result.allocated,
        result.seed_high_water_mark,
        result.high_water_mark,
    )
    return result

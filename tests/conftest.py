from __future__ import annotations

import pytest

from skinsync.config.catalog import CatalogConfig, LocaleTarget

_ENV_VARS = (
    "SKINSYNC_OUTPUT_DIR",
    "SKINSYNC_API_BASE_URL",
    "SKINSYNC_TIMEOUT_SECONDS",
    "SKINSYNC_LOCALES",
    "SKINSYNC_REFERENCE_LOCALE",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def two_locale_catalog() -> CatalogConfig:
    return CatalogConfig(
        locales=(
            LocaleTarget(code="en", filename="en-skins.json"),
            LocaleTarget(code="ru", filename="ru-skins.json"),
        ),
        reference_locale="en",
    )

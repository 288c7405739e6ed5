"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    DEFAULT_LOCALES,
    CatalogConfig,
    LocaleTarget,
    get_catalog_config,
    parse_locale_targets,
)
from .env import optional_env_var, positive_float_env_var
from .errors import ConfigurationError
from .http_client import HttpClientConfig
from .logging import configure_logging
from .skins_api import SkinsApiConfig, get_skins_api_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "DEFAULT_LOCALES",
    "CatalogConfig",
    "ConfigurationError",
    "HttpClientConfig",
    "LocaleTarget",
    "SkinsApiConfig",
    "StorageConfig",
    "configure_logging",
    "get_catalog_config",
    "get_skins_api_config",
    "get_storage_config",
    "optional_env_var",
    "parse_locale_targets",
    "positive_float_env_var",
]

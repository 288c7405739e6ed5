"""Upstream skins API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .env import optional_env_var, positive_float_env_var
from .http_client import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig

SKINS_API_BASE_URL = "https://raw.githubusercontent.com/ByMykel/CSGO-API/main/public/api"
SKINS_API_TIMEOUT_SECONDS = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class SkinsApiConfig:
    """Holds the upstream base URL and HTTP client settings."""

    base_url: str
    http: HttpClientConfig

    def url_for(self, locale: str) -> str:
        return f"{self.base_url.rstrip('/')}/{locale}/skins.json"

    def with_overrides(
        self,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
    ) -> SkinsApiConfig:
        http = self.http
        if timeout_seconds is not None:
            http = replace(http, timeout_seconds=timeout_seconds)
        return SkinsApiConfig(base_url=base_url or self.base_url, http=http)


def get_skins_api_config(*, http: HttpClientConfig | None = None) -> SkinsApiConfig:
    base_url = optional_env_var("SKINSYNC_API_BASE_URL") or SKINS_API_BASE_URL
    timeout = positive_float_env_var("SKINSYNC_TIMEOUT_SECONDS") or SKINS_API_TIMEOUT_SECONDS
    return SkinsApiConfig(
        base_url=base_url,
        http=http
        or HttpClientConfig(
            timeout_seconds=timeout,
            default_headers={"Accept": "application/json"},
        ),
    )

"""HTTP client for the upstream skins API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from skinsync.adapters.http_client import HttpClient
from skinsync.config.skins_api import get_skins_api_config

from .translator import InvalidSkinPayloadError, parse_skin_list

if TYPE_CHECKING:
    from collections.abc import Callable

    from skinsync.config.http_client import HttpClientConfig
    from skinsync.config.skins_api import SkinsApiConfig
    from skinsync.domain.model import RawSkin

log = getLogger(__name__)


class SkinsApiError(RuntimeError):
    """Raised when the skins API times out or answers with an unusable payload."""

    def __init__(self, message: str, *, locale: str) -> None:
        super().__init__(message)
        self.locale = locale


class SkinsApiClient:
    """Fetch the full skin list of one locale per call.

    Calls block until the request completes or the configured timeout
    expires; the timeout caps the whole request, not just each socket
    operation. HTTP and transport errors propagate as ``httpx`` exceptions.
    """

    def __init__(
        self,
        *,
        config: SkinsApiConfig | None = None,
        client_factory: Callable[[HttpClientConfig], HttpClient] | None = None,
    ) -> None:
        self._config = config or get_skins_api_config()
        self._client_factory = client_factory or HttpClient

    @property
    def config(self) -> SkinsApiConfig:
        return self._config

    def __call__(self, locale: str) -> list[RawSkin]:
        return self.fetch_skins(locale)

    def fetch_skins(self, locale: str) -> list[RawSkin]:
        return asyncio.run(self._fetch_skins_async(locale))

    async def _fetch_skins_async(self, locale: str) -> list[RawSkin]:
        url = self._config.url_for(locale)
        log.info("Fetching skins for %s from %s", locale, url)
        timeout_seconds = self._config.http.timeout_seconds
        async with self._client_factory(self._config.http) as client:
            try:
                async with asyncio.timeout(timeout_seconds):
                    response = await client.get(url)
            except TimeoutError as exc:
                raise SkinsApiError(
                    f"Timed out after {timeout_seconds}s waiting for {url}", locale=locale
                ) from exc
            response.raise_for_status()
            try:
                payload = response.json()
            except ValueError as exc:
                raise SkinsApiError(f"Invalid JSON from {url}", locale=locale) from exc

        try:
            skins = parse_skin_list(payload)
        except InvalidSkinPayloadError as exc:
            raise SkinsApiError(f"Unexpected payload from {url}: {exc}", locale=locale) from exc
        log.debug("Fetched %s skins for %s", len(skins), locale)
        return skins

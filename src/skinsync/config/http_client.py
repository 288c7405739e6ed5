"""Configuration types for the async HTTP client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True, frozen=True)
class HttpClientConfig:
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_headers: Mapping[str, str] | None = None

"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env_var(name: str) -> str | None:
    """Return a stripped environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def positive_float_env_var(name: str) -> float | None:
    value = optional_env_var(name)
    if value is None:
        return None
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if parsed <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")
    return parsed

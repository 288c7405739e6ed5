"""Locale and identifier settings for the skin catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_REFERENCE_LOCALE: Final[str] = "en"
DEFAULT_ID_PREFIX: Final[str] = "skin-"


@dataclass(frozen=True, slots=True)
class LocaleTarget:
    """A locale code and the catalog file it is written to."""

    code: str
    filename: str


DEFAULT_LOCALES: Final[tuple[LocaleTarget, ...]] = (
    LocaleTarget(code="en", filename="en-skins.json"),
    LocaleTarget(code="pt-BR", filename="pt-BR-skins.json"),
    LocaleTarget(code="ru", filename="ru-skins.json"),
    LocaleTarget(code="zh-CN", filename="zh-CN-skins.json"),
)


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Ordered locales plus the settings shared by every locale.

    Locales are processed in the order given; the reference locale's
    persisted catalog seeds identifier reuse for the next run.
    """

    locales: tuple[LocaleTarget, ...] = DEFAULT_LOCALES
    reference_locale: str = DEFAULT_REFERENCE_LOCALE
    id_prefix: str = DEFAULT_ID_PREFIX

    def __post_init__(self) -> None:
        if not self.locales:
            raise ConfigurationError("At least one locale must be configured")
        codes = [target.code for target in self.locales]
        if len(set(codes)) != len(codes):
            raise ConfigurationError(f"Duplicate locale codes: {', '.join(codes)}")
        if self.reference_locale not in codes:
            raise ConfigurationError(
                f"Reference locale {self.reference_locale!r} is not among: {', '.join(codes)}"
            )
        if not self.id_prefix:
            raise ConfigurationError("Identifier prefix must not be empty")

    @property
    def reference(self) -> LocaleTarget:
        for target in self.locales:
            if target.code == self.reference_locale:
                return target
        raise ConfigurationError(f"Unknown reference locale: {self.reference_locale}")


def parse_locale_targets(value: str) -> tuple[LocaleTarget, ...]:
    """Parse ``code=file,code=file`` into locale targets, keeping the given order."""

    targets: list[LocaleTarget] = []
    for chunk in value.split(","):
        entry = chunk.strip()
        if not entry:
            continue
        code, sep, filename = entry.partition("=")
        if not sep or not code.strip() or not filename.strip():
            raise ConfigurationError(f"Invalid locale entry {entry!r}; expected code=file")
        targets.append(LocaleTarget(code=code.strip(), filename=filename.strip()))
    if not targets:
        raise ConfigurationError("Locale override is empty")
    return tuple(targets)


def get_catalog_config() -> CatalogConfig:
    locales_value = optional_env_var("SKINSYNC_LOCALES")
    locales = parse_locale_targets(locales_value) if locales_value else DEFAULT_LOCALES
    reference = optional_env_var("SKINSYNC_REFERENCE_LOCALE") or DEFAULT_REFERENCE_LOCALE
    return CatalogConfig(locales=locales, reference_locale=reference)

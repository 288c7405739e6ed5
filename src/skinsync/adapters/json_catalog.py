"""Per-locale catalog documents stored as indented JSON files."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from skinsync.adapters.skins_api.translator import InvalidSkinPayloadError, parse_skin_list
from skinsync.config.storage import get_storage_config
from skinsync.domain.normalization import normalize_skin

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from skinsync.config.catalog import LocaleTarget
    from skinsync.config.storage import StorageConfig
    from skinsync.domain.model import SkinItem

log = getLogger(__name__)


class CatalogReadError(RuntimeError):
    """Raised when an existing catalog document cannot be decoded."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


def render_catalog(items: Iterable[SkinItem]) -> str:
    """Serialise items as two-space indented JSON ending in a newline.

    The output depends only on the items and their order, so an unchanged
    catalog renders to identical bytes.
    """

    documents = [item.to_document() for item in items]
    return f"{json.dumps(documents, indent=2, ensure_ascii=False)}\n"


class JsonCatalogStore:
    """Catalog store reading and writing ``<output_dir>/<locale file>``."""

    def __init__(self, *, storage: StorageConfig | None = None) -> None:
        self._storage = storage or get_storage_config()

    def load(self, target: LocaleTarget) -> list[SkinItem]:
        path = self._storage.path_for(target)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.info("No existing catalog for %s at %s; starting empty", target.code, path)
            return []

        try:
            payload = json.loads(content)
            raw_items = parse_skin_list(payload)
        except (json.JSONDecodeError, InvalidSkinPayloadError) as exc:
            raise CatalogReadError(f"Cannot read catalog {path}: {exc}", path=path) from exc

        log.debug("Loaded %s items for %s from %s", len(raw_items), target.code, path)
        return [normalize_skin(raw) for raw in raw_items]

    def save(self, target: LocaleTarget, items: Sequence[SkinItem]) -> Path:
        path = self._storage.path_for(target, ensure=True)
        path.write_text(render_catalog(items), encoding="utf-8", newline="\n")
        return path

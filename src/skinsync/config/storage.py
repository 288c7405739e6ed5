"""Catalog output location helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from .env import optional_env_var

if TYPE_CHECKING:
    from .catalog import LocaleTarget

DEFAULT_OUTPUT_DIR: Final[Path] = Path("web") / "public" / "js" / "json" / "skins"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    output_dir: Path

    def resolve_output_dir(self) -> Path:
        return self.output_dir.expanduser().resolve()

    def ensure_output_dir(self) -> Path:
        output_dir = self.resolve_output_dir()
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir

    def path_for(self, target: LocaleTarget, *, ensure: bool = False) -> Path:
        base = self.ensure_output_dir() if ensure else self.resolve_output_dir()
        return base / target.filename


def get_storage_config(*, output_dir: Path | None = None) -> StorageConfig:
    if output_dir is not None:
        return StorageConfig(output_dir=output_dir)
    env_dir = optional_env_var("SKINSYNC_OUTPUT_DIR")
    return StorageConfig(output_dir=Path(env_dir) if env_dir else DEFAULT_OUTPUT_DIR)

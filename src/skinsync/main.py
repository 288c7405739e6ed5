from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from skinsync.app import sync_skins
from skinsync.config import (
    ConfigurationError,
    configure_logging,
    get_catalog_config,
    get_skins_api_config,
    get_storage_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synchronise localized skin catalogs with stable identifiers"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory holding the per-locale catalog files (defaults to config)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="Base URL of the skins API (defaults to config)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for each locale download (defaults to config)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every allocated identifier",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.timeout is not None and parsed_args.timeout <= 0:
            raise ValueError("Timeout must be positive")  # noqa: TRY301
        catalog = get_catalog_config()
        api = get_skins_api_config().with_overrides(
            base_url=parsed_args.base_url,
            timeout_seconds=parsed_args.timeout,
        )
        storage = get_storage_config(output_dir=parsed_args.output_dir)
    except (ValueError, ConfigurationError):
        log.exception("Configuration error")
        sys.exit(2)

    try:
        sync_skins(catalog=catalog, api=api, storage=storage)
    except Exception:
        log.exception("Failed to update skins data")
        sys.exit(1)

    log.info("Skins data updated successfully.")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

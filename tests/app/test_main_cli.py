from __future__ import annotations

from pathlib import Path

import pytest

from skinsync import main as main_module
from skinsync.config.skins_api import SKINS_API_BASE_URL
from skinsync.config.storage import DEFAULT_OUTPUT_DIR


def test_main_cli_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_sync(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(main_module, "sync_skins", fake_sync)

    main_module.main([])

    api = captured["api"]
    storage = captured["storage"]
    assert api.base_url == SKINS_API_BASE_URL  # type: ignore[attr-defined]
    assert api.http.timeout_seconds == 30.0  # type: ignore[attr-defined]
    assert storage.output_dir == DEFAULT_OUTPUT_DIR  # type: ignore[attr-defined]
    assert captured["catalog"].reference_locale == "en"  # type: ignore[attr-defined]


def test_main_cli_with_flags(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_sync(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(main_module, "sync_skins", fake_sync)

    main_module.main(
        [
            "--output-dir",
            str(tmp_path),
            "--base-url",
            "https://mirror.test/api",
            "--timeout",
            "5",
            "--verbose",
        ]
    )

    assert captured["api"].base_url == "https://mirror.test/api"  # type: ignore[attr-defined]
    assert captured["api"].http.timeout_seconds == 5.0  # type: ignore[attr-defined]
    assert captured["storage"].output_dir == tmp_path  # type: ignore[attr-defined]


def test_main_cli_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "sync_skins", lambda **_: None)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--timeout", "0"])

    assert excinfo.value.code == 2


def test_main_cli_rejects_invalid_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKINSYNC_LOCALES", "broken")
    monkeypatch.setattr(main_module, "sync_skins", lambda **_: None)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 2


def test_main_cli_reports_failures_with_exit_code(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    def failing_sync(**_: object) -> None:
        raise RuntimeError("upstream exploded")

    monkeypatch.setattr(main_module, "sync_skins", failing_sync)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 1
    assert "Failed to update skins data" in caplog.text


def test_main_cli_logs_success(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(main_module, "sync_skins", lambda **_: None)

    with caplog.at_level("INFO"):
        main_module.main([])

    assert "Skins data updated successfully." in caplog.text

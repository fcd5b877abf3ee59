from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from monthday import main as main_module
from monthday.config import LOG_LEVEL_ENV_VAR, ZONE_ENV_VAR
from monthday.domain import fixed_clock

if TYPE_CHECKING:
    from datetime import tzinfo

    from monthday.domain import Clock


def test_check_prints_normalised_value(capsys: pytest.CaptureFixture[str]) -> None:
    main_module.main(["check", "2", "29"])

    assert capsys.readouterr().out.strip() == "--02-29"


def test_check_invalid_combination_exits_with_usage_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["check", "4", "31"])

    assert excinfo.value.code == 2
    errors = [record for record in caplog.records if record.levelname == "ERROR"]
    assert len(errors) == 1
    assert "value 31 is not valid for month APRIL" in errors[0].getMessage()
    assert errors[0].exc_info is None


def test_parse_default_format_after_separator(capsys: pytest.CaptureFixture[str]) -> None:
    main_module.main(["parse", "--", "--12-03"])

    assert capsys.readouterr().out.strip() == "--12-03"


def test_parse_with_pattern(capsys: pytest.CaptureFixture[str]) -> None:
    main_module.main(["parse", "03/12", "--pattern", "dd/MM"])

    assert capsys.readouterr().out.strip() == "--12-03"


def test_parse_invalid_text_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["parse", "31/04", "--pattern", "dd/MM"])

    assert excinfo.value.code == 2


def test_today_uses_configured_zone(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    captured: dict[str, object] = {}

    def fake_system_clock(zone: tzinfo | str | None = None) -> Clock:
        captured["zone"] = zone
        return fixed_clock(datetime(2021, 2, 17, 12, tzinfo=UTC))

    def unexpected_system_clock(zone: tzinfo | str | None = None) -> Clock:
        raise AssertionError(f"zone flag path used for {zone!r}")

    monkeypatch.setenv(ZONE_ENV_VAR, "Europe/Berlin")
    monkeypatch.setattr("monthday.config.clock.system_clock", fake_system_clock)
    monkeypatch.setattr(main_module, "system_clock", unexpected_system_clock)

    main_module.main(["today"])

    assert str(captured["zone"]) == "Europe/Berlin"
    assert capsys.readouterr().out.strip() == "--02-17"


def test_today_zone_flag_overrides_environment(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    captured: dict[str, object] = {}

    def fake_system_clock(zone: tzinfo | str | None = None) -> Clock:
        captured["zone"] = zone
        return fixed_clock(datetime(2021, 12, 31, 20, tzinfo=UTC), "Asia/Tokyo")

    monkeypatch.setenv(ZONE_ENV_VAR, "Europe/Berlin")
    monkeypatch.setattr(main_module, "system_clock", fake_system_clock)

    main_module.main(["today", "--zone", "Asia/Tokyo"])

    assert captured["zone"] == "Asia/Tokyo"
    assert capsys.readouterr().out.strip() == "--01-01"


def test_invalid_log_level_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["check", "1", "1"])

    assert excinfo.value.code == 2

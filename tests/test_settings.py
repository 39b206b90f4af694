"""Tests for environment settings and the application container."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from src.app import create_app
from src.config.settings import Settings, load_settings
from src.timerange.parser import UnsupportedSpecError
from src.timerange.schema import WeekStart


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = Settings(_env_file=None)
    assert settings.week_start == WeekStart.monday
    assert settings.locale_codes == ("en", "de")
    assert settings.log_level == "INFO"


def test_week_start_from_env_is_case_insensitive(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("WEEK_START", "Sunday")
    settings = Settings(_env_file=None)
    assert settings.week_start == WeekStart.sunday
    assert settings.timerange_config().week_start == WeekStart.sunday


def test_invalid_week_start_is_rejected(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, WEEK_START="friday")


def test_locales_are_normalized_and_ordered(clean_env: pytest.MonkeyPatch) -> None:
    settings = Settings(_env_file=None, LOCALES=" DE , en ,")
    assert settings.locale_codes == ("de", "en")
    assert [pack.code for pack in settings.locale_packs()] == ["de", "en"]


@pytest.mark.parametrize("value", ["fr", "en,xx", " , "])
def test_invalid_locales_are_rejected(clean_env: pytest.MonkeyPatch, value: str) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOCALES=value)


def test_load_settings_wraps_validation_errors(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("WEEK_START", "friday")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()


def test_create_app_builds_registry_in_configured_order(clean_env: pytest.MonkeyPatch) -> None:
    app = create_app(Settings(_env_file=None, LOCALES="de", WEEK_START="sunday"))
    assert app.registry.codes == ("de",)
    assert app.config.week_start == WeekStart.sunday

    parser = app.parser(now=datetime(2025, 6, 18, 9, 0))
    assert parser.parse("thisweek").start == datetime(2025, 6, 15)
    assert parser.parse("märz 2025").start == datetime(2025, 3, 1)
    with pytest.raises(UnsupportedSpecError):
        parser.parse("march 2025")


def test_app_parsers_share_registry_but_not_now(clean_env: pytest.MonkeyPatch) -> None:
    app = create_app(Settings(_env_file=None))
    first = app.parser(now=datetime(2025, 1, 1, 12, 0))
    second = app.parser(now=datetime(2025, 6, 1, 12, 0))
    assert first.parse("today") != second.parse("today")
    assert first.parse("october 2025") == second.parse("october 2025")

"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).

Values are validated at startup so the time range parser only ever sees a valid week start and an
explicit, ordered list of known locale packs.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.timerange.locales import DEFAULT_LOCALE_CODES, LocalePack, get_pack
from src.timerange.schema import TimeRangeConfig, WeekStart


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    week_start: WeekStart = Field(default=WeekStart.monday, alias="WEEK_START")
    locales: str = Field(default=",".join(DEFAULT_LOCALE_CODES), alias="LOCALES")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("week_start", mode="before")
    @classmethod
    def validate_week_start(cls, value: object) -> WeekStart:
        """Accept "monday"/"sunday" in any case; reject anything else."""

        if isinstance(value, WeekStart):
            return value
        return WeekStart.from_name(str(value))

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, value: str) -> str:
        """Validate the comma-separated locale list.

        Order matters: on month-name collisions the later locale wins. Every code must name a
        built-in locale pack and at least one code is required.
        """

        codes = [code.strip().lower() for code in value.split(",") if code.strip()]
        if not codes:
            raise ValueError("LOCALES must name at least one locale")
        for code in codes:
            try:
                get_pack(code)
            except KeyError as exc:
                raise ValueError(str(exc)) from exc
        return ",".join(codes)

    @property
    def locale_codes(self) -> tuple[str, ...]:
        return tuple(self.locales.split(","))

    def locale_packs(self) -> tuple[LocalePack, ...]:
        """Configured locale packs in registration order."""

        return tuple(get_pack(code) for code in self.locale_codes)

    def timerange_config(self) -> TimeRangeConfig:
        return TimeRangeConfig(week_start=self.week_start)


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        # Raising here is fine: caller can decide how to handle startup errors.
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc

"""gtrans configuration settings."""

from typing import ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleTranslateSettings(BaseSettings):
    """Google Translate configuration settings."""

    API_KEY: str = Field(default="", alias="GOOGLE_TRANSLATE_API_KEY")
    LANG: str = Field(default="", alias="GOOGLE_TRANSLATE_LANG")
    SECOND_LANG: str = Field(default="", alias="GOOGLE_TRANSLATE_SECOND_LANG")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class LocaleSettings(BaseSettings):
    """POSIX locale variables, read from the process environment only.

    The order of ``LOCALE_ENV_VARS`` is the POSIX precedence: the language
    list first, then the all-categories override, then the general locale.
    """

    LOCALE_ENV_VARS: ClassVar[tuple[str, ...]] = ("LANGUAGE", "LC_ALL", "LANG")

    LANGUAGE: str = ""
    LC_ALL: str = ""
    LANG: str = ""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    def candidates(self) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs in lookup order."""
        return [(name, getattr(self, name)) for name in self.LOCALE_ENV_VARS]


class Settings(BaseSettings):
    """gtrans configuration settings."""

    LOG_LEVEL: str = Field(default="WARNING", alias="GTRANS_LOG_LEVEL")
    LOG_FORMAT: str = Field(default="console", alias="GTRANS_LOG_FORMAT")

    google_translate: GoogleTranslateSettings
    locale: LocaleSettings

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Accept ``console`` or ``json``, case-insensitively."""
        value = (v or "console").strip().lower()
        if value not in ("console", "json"):
            raise ValueError(f"GTRANS_LOG_FORMAT must be 'console' or 'json', got {v!r}")
        return value

    @property
    def is_json_logging(self) -> bool:
        """Check if logs should be rendered as JSON lines."""
        return self.LOG_FORMAT == "json"

    def __init__(self, **kwargs):
        settings_map = {
            "google_translate": GoogleTranslateSettings,
            "locale": LocaleSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()

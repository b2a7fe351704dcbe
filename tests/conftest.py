import pytest

from gtrans.core.config import (
    GoogleTranslateSettings,
    LocaleSettings,
    Settings,
)

ENV_VARS = [
    "GOOGLE_TRANSLATE_API_KEY",
    "GOOGLE_TRANSLATE_LANG",
    "GOOGLE_TRANSLATE_SECOND_LANG",
    "GTRANS_LOG_LEVEL",
    "GTRANS_LOG_FORMAT",
    "LANGUAGE",
    "LC_ALL",
    "LANG",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run every test without the caller's locale, API key or `.env` file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_settings():
    """Build a Settings snapshot from keyword overrides.

    Keys are the environment variable names, e.g.
    ``make_settings(GOOGLE_TRANSLATE_LANG="ja", LANG="en_US.UTF-8")``.
    """

    def _make(**env):
        google_translate = GoogleTranslateSettings(
            GOOGLE_TRANSLATE_API_KEY=env.get("GOOGLE_TRANSLATE_API_KEY", ""),
            GOOGLE_TRANSLATE_LANG=env.get("GOOGLE_TRANSLATE_LANG", ""),
            GOOGLE_TRANSLATE_SECOND_LANG=env.get("GOOGLE_TRANSLATE_SECOND_LANG", ""),
        )
        locale = LocaleSettings(
            LANGUAGE=env.get("LANGUAGE", ""),
            LC_ALL=env.get("LC_ALL", ""),
            LANG=env.get("LANG", ""),
        )
        return Settings(google_translate=google_translate, locale=locale)

    return _make

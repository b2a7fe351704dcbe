import pytest
from pydantic import ValidationError

from gtrans.core.config import GoogleTranslateSettings, LocaleSettings, Settings


@pytest.mark.unit
class TestGoogleTranslateSettings:
    def test_default_values(self):
        settings = GoogleTranslateSettings()

        assert settings.API_KEY == ""
        assert settings.LANG == ""
        assert settings.SECOND_LANG == ""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_TRANSLATE_API_KEY", "api-key")
        monkeypatch.setenv("GOOGLE_TRANSLATE_LANG", "ja")
        monkeypatch.setenv("GOOGLE_TRANSLATE_SECOND_LANG", "en")
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")

        settings = GoogleTranslateSettings()

        assert settings.API_KEY == "api-key"
        assert settings.LANG == "ja"
        assert settings.SECOND_LANG == "en"

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("GOOGLE_TRANSLATE_API_KEY=from-dotenv\n")

        assert GoogleTranslateSettings().API_KEY == "from-dotenv"


@pytest.mark.unit
class TestLocaleSettings:
    def test_candidates_follow_posix_precedence(self, monkeypatch):
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        monkeypatch.setenv("LC_ALL", "fr_FR.UTF-8")
        monkeypatch.setenv("LANGUAGE", "ja_JP")

        assert LocaleSettings().candidates() == [
            ("LANGUAGE", "ja_JP"),
            ("LC_ALL", "fr_FR.UTF-8"),
            ("LANG", "en_US.UTF-8"),
        ]

    def test_ignores_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LANG=de_DE.UTF-8\n")

        assert LocaleSettings().LANG == ""


@pytest.mark.unit
class TestSettings:
    def test_default_values(self):
        settings = Settings()

        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_FORMAT == "console"
        assert settings.is_json_logging is False
        assert isinstance(settings.google_translate, GoogleTranslateSettings)
        assert isinstance(settings.locale, LocaleSettings)

    def test_json_log_format(self, monkeypatch):
        monkeypatch.setenv("GTRANS_LOG_FORMAT", "JSON")

        assert Settings().is_json_logging is True

    def test_invalid_log_format_raises(self, monkeypatch):
        monkeypatch.setenv("GTRANS_LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings()

    def test_explicit_sub_settings_are_kept(self):
        google_translate = GoogleTranslateSettings(GOOGLE_TRANSLATE_LANG="ja")

        settings = Settings(google_translate=google_translate)

        assert settings.google_translate.LANG == "ja"

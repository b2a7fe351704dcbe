"""Google Translate v2 API client."""

from gtrans.integrations.google_translate.translate import GoogleTranslate

__all__ = ["GoogleTranslate"]

"""Target language selection."""

from gtrans.modules.language.locale import lang_code_from_locale
from gtrans.modules.language.switch import switch_target_language
from gtrans.modules.language.target import resolve_target_language

__all__ = [
    "lang_code_from_locale",
    "resolve_target_language",
    "switch_target_language",
]

"""Target language resolution."""

from gtrans.core.config import Settings
from gtrans.core.exceptions import ConfigurationMissingError
from gtrans.core.logging import get_module_logger
from gtrans.modules.language.locale import lang_code_from_locale

logger = get_module_logger()

MISSING_LANGUAGE_MESSAGE = (
    "cannot detect language. "
    "Please export $LANG or $GOOGLE_TRANSLATE_LANG (e.g. en, ja)"
)


def resolve_target_language(explicit: str, settings: Settings) -> str:
    """Decide which language to translate into.

    Args:
        explicit (str): Target given on the command line, may be empty.
        settings (Settings): Configuration snapshot taken at startup.

    Returns:
        str: The language code, taken from the first non-empty source among
        the explicit target, GOOGLE_TRANSLATE_LANG, then LANGUAGE, LC_ALL
        and LANG.

    Raises:
        ConfigurationMissingError: If none of the sources yields a code.
    """
    if explicit:
        logger.debug("target_language_resolved", source="flag", language=explicit)
        return explicit

    override = settings.google_translate.LANG
    if override:
        logger.debug(
            "target_language_resolved",
            source="GOOGLE_TRANSLATE_LANG",
            language=override,
        )
        return override

    for name, value in settings.locale.candidates():
        code = lang_code_from_locale(value)
        if code:
            logger.debug(
                "target_language_resolved", source=name, locale=value, language=code
            )
            return code

    logger.debug("target_language_unresolved")
    raise ConfigurationMissingError(MISSING_LANGUAGE_MESSAGE)

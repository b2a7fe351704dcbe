"""Second language switching.

With GOOGLE_TRANSLATE_SECOND_LANG set, text that is already in the target
language is translated into the second language instead, so piping output
back through gtrans alternates between the two.
"""

from typing import Callable

from gtrans.core.logging import get_module_logger

logger = get_module_logger()


def switch_target_language(
    text: str,
    target: str,
    second_language: str,
    detect: Callable[[str], str],
) -> str:
    """Return the final target language for ``text``.

    ``detect`` is only called when a second language is configured. Codes are
    compared as exact strings, so ``zh-CN`` and ``zh`` never match.
    """
    if not second_language:
        return target

    source = detect(text)
    if source == target:
        logger.info(
            "second_language_selected",
            detected=source,
            target=target,
            second_language=second_language,
        )
        return second_language

    return target

"""Language codes from POSIX locale strings.

See https://en.wikipedia.org/wiki/Locale_(computer_software)
"""

SIMPLIFIED_CHINESE_LOCALES = ("zh_CN", "zh_SG")
# Regions using Chinese Traditional: Taiwan, Hong Kong
TRADITIONAL_CHINESE_LOCALES = ("zh_TW", "zh_HK")


def lang_code_from_locale(locale: str) -> str:
    """Return the language code for a locale such as ``en_US.UTF-8``.

    Chinese locales map to the script-qualified codes Google Translate
    expects. Anything without an underscore yields an empty string.
    """
    if not locale:
        return ""

    if locale.startswith(SIMPLIFIED_CHINESE_LOCALES):
        return "zh-CN"

    if locale.startswith(TRADITIONAL_CHINESE_LOCALES):
        return "zh-TW"

    code, separator, _ = locale.partition("_")
    if not separator:
        return ""

    return code

"""Ways of delivering a translation to the user."""

from typing import TextIO

from gtrans.core.config import Settings
from gtrans.modules.output.base import OutputStrategy
from gtrans.modules.output.browser import OpenInBrowser
from gtrans.modules.output.console import PrintTranslation


def select_output_strategy(
    open_browser: bool, settings: Settings, stream: TextIO
) -> OutputStrategy:
    """Pick the browser strategy when requested, printing otherwise."""
    if open_browser:
        return OpenInBrowser()
    return PrintTranslation(settings, stream)


__all__ = [
    "OpenInBrowser",
    "OutputStrategy",
    "PrintTranslation",
    "select_output_strategy",
]

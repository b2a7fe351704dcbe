"""Open Google Translate in a web browser."""

import webbrowser
from typing import Callable
from urllib.parse import quote_plus

from gtrans.core.exceptions import BrowserLaunchError
from gtrans.core.logging import get_module_logger
from gtrans.modules.output.base import OutputStrategy

GOOGLE_TRANSLATE_URL = "https://translate.google.com/#auto/{target}/{text}"

logger = get_module_logger()


def google_translate_url(text: str, target: str) -> str:
    """Build the Google Translate web URL for ``text``, source auto-detected."""
    return GOOGLE_TRANSLATE_URL.format(target=target, text=quote_plus(text))


class OpenInBrowser(OutputStrategy):
    """Show the translation on translate.google.com instead of printing it.

    No API key is needed on this path.
    """

    def __init__(self, opener: Callable[[str], bool] = webbrowser.open):
        self.opener = opener

    def deliver(self, text: str, target: str) -> None:
        url = google_translate_url(text, target)
        logger.info("opening_browser", target=target)
        if not self.opener(url):
            logger.debug("browser_launch_failed", url=url)
            raise BrowserLaunchError(f"cannot open browser for {url}")

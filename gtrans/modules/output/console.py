"""Print translations to a stream."""

from typing import TextIO

from gtrans.core.config import Settings
from gtrans.core.logging import get_module_logger
from gtrans.integrations.google_translate import GoogleTranslate
from gtrans.modules.language.switch import switch_target_language
from gtrans.modules.output.base import OutputStrategy

logger = get_module_logger()


class PrintTranslation(OutputStrategy):
    """Translate through the Google Translate API and write the result.

    The client is created on first use so a missing API key is reported
    before any network call, and only when a translation is actually needed.
    """

    def __init__(
        self,
        settings: Settings,
        stream: TextIO,
        client: GoogleTranslate | None = None,
    ):
        self.settings = settings
        self.stream = stream
        self.client = client

    def _get_client(self) -> GoogleTranslate:
        if self.client is None:
            self.client = GoogleTranslate(
                api_key=self.settings.google_translate.API_KEY
            )
        return self.client

    def deliver(self, text: str, target: str) -> None:
        client = self._get_client()
        target = switch_target_language(
            text,
            target,
            self.settings.google_translate.SECOND_LANG,
            client.detect,
        )
        translated = client.translate(text, target)
        self.stream.write(translated + "\n")
        self.stream.flush()
        logger.debug("translation_written", target=target)

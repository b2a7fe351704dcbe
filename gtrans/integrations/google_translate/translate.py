"""Google Translate v2 API integration."""

from googleapiclient.discovery import Resource  # type: ignore

from gtrans.core.logging import get_module_logger
from gtrans.integrations.google_translate.service import (
    execute_google_api_call,
    get_google_translate_service,
    handle_google_api_errors,
)

logger = get_module_logger()


class GoogleTranslate:
    """
    A small client over the Google Translate v2 detections and translations resources.

    Intended usage is to instantiate the class with an API key. A pre-built
    service resource can be passed instead, which is how tests inject mocks.
    Each call sends exactly one text and is never retried.

    Attributes:
        service (Resource): An authenticated Translate v2 service resource.
    """

    def __init__(self, api_key: str | None = None, service: Resource | None = None):
        self.service = service if service else get_google_translate_service(api_key or "")
        logger.debug("google_translate_initialized", service_type="translate")

    @handle_google_api_errors("detection")
    def detect(self, text: str) -> str:
        """Detect the language of a text.

        Args:
            text (str): The text to inspect.
        Returns:
            str: The best-guess language code, e.g. "en".

        Reference:
            https://cloud.google.com/translate/docs/reference/rest/v2/detect
        """
        response = execute_google_api_call(
            self.service, "detections", "list", q=[text]
        )
        language = response["detections"][0][0]["language"]
        logger.info("language_detected", language=language)
        return language

    @handle_google_api_errors("translate")
    def translate(self, text: str, target: str) -> str:
        """Translate a text into the target language as plain text.

        Args:
            text (str): The text to translate. The source language is detected by the API.
            target (str): The language code to translate into.
        Returns:
            str: The translated text.

        Reference:
            https://cloud.google.com/translate/docs/reference/rest/v2/translate
        """
        response = execute_google_api_call(
            self.service,
            "translations",
            "list",
            q=[text],
            target=target,
            format="text",
        )
        translation = response["translations"][0]
        logger.info(
            "text_translated",
            target=target,
            detected_source_language=translation.get("detectedSourceLanguage"),
        )
        return translation["translatedText"]

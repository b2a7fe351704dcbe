"""Custom exceptions for gtrans.

Every failure the command line reports to the user derives from
``GtransError``; anything else is a bug and is left to propagate.
"""


class GtransError(Exception):
    """Base exception for all gtrans errors.

    Example:
        try:
            strategy.deliver(text, target)
        except GtransError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class ConfigurationMissingError(GtransError):
    """Raised when required configuration cannot be found.

    Example:
        >>> resolve_target_language("", Settings())
        Traceback (most recent call last):
        ...
        ConfigurationMissingError: cannot detect language. Please export $LANG or $GOOGLE_TRANSLATE_LANG (e.g. en, ja)
    """

    pass


class UpstreamFailureError(GtransError):
    """Raised when the Google Translate API call fails or returns garbage.

    The original exception is chained as ``__cause__``.
    """

    pass


class InputFailureError(GtransError):
    """Raised when the input text cannot be read from standard input."""

    pass


class BrowserLaunchError(GtransError):
    """Raised when no browser could be opened for Google Translate."""

    pass

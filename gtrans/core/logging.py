"""gtrans structured logging.

Log records always go to stderr; stdout carries only translated text.
"""

import inspect
import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

from .config import Settings, settings

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _renderer(config: Settings):
    if config.is_json_logging:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(config: Settings = settings) -> BoundLogger:
    """Configure structlog and the root logger from ``config``.

    Under pytest every record is dropped.
    """
    if _is_test_environment():
        processors = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(config),
        ]
        level = getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return the shared logger bound to the calling module's name."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None

    if not module_name:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )

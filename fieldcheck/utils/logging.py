import logging
import sys

import structlog


def get_logger(name: str | None = None):
    """
    Get a logger with fieldcheck prefix.

    Args:
        name: Module name (typically __name__). If None, returns root fieldcheck logger.

    Returns:
        A structlog logger with fieldcheck prefix.
    """
    if name is None:
        return structlog.get_logger("fieldcheck")
    if name == "fieldcheck" or name.startswith("fieldcheck."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"fieldcheck.{name}")


logger = get_logger(__name__)


def setup_third_party_logging(debug_all: bool = False):
    """
    Configure third-party library logging levels.

    Args:
        debug_all: If True, enable verbose logging for all libraries.
                   If False, set third-party loggers to WARNING level.
    """

    if debug_all:
        return

    for log_name in ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx"):
        logging.getLogger(log_name).setLevel(logging.WARNING)


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging(debug_all: bool | None = None, log_level: str | None = None) -> None:
    """
    Setup logging for the application.

    Values not passed explicitly come from LoggingSettings:
        DEBUG_ALL: If "true", enable DEBUG logging for all libraries.
        LOG_LEVEL: Level for the fieldcheck namespace (default INFO).
    """
    from fieldcheck.config import get_settings

    settings = get_settings().logging
    if debug_all is None:
        debug_all = settings.debug_all
    if log_level is None:
        log_level = settings.log_level

    # Root logger level - WARNING by default, DEBUG only if DEBUG_ALL is set
    root_level = "DEBUG" if debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s"
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    setup_third_party_logging(debug_all)

    logging.getLogger("fieldcheck").setLevel(log_level.upper())

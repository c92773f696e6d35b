"""Structured logging configuration using structlog.

JSON lines in production, coloured console output in development. Every
event passes through ``mask_credentials`` so provider keys cannot reach the
log stream, whichever module logs them.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


APP_LOG_NAME = "mail-categorizer"

# Event keys whose values are replaced before rendering (matched lowercase)
CREDENTIAL_KEYS = frozenset(
    {"credential", "api_key", "authorization", "x-api-key", "headers"}
)
MASK = "***"

THIRD_PARTY_LEVELS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict["app"] = APP_LOG_NAME
    return event_dict


def mask_credentials(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace the value of any credential-like key with a fixed mask."""
    for key in event_dict:
        if key.lower() in CREDENTIAL_KEYS:
            event_dict[key] = MASK
    return event_dict


def build_processors(environment: str) -> tuple[list[Processor], Processor]:
    """Return ``(shared_processors, renderer)`` for the environment."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        mask_credentials,
    ]

    if environment.lower() == "production":
        processors.append(structlog.processors.format_exc_info)
        return processors, structlog.processors.JSONRenderer()

    processors.append(structlog.processors.StackInfoRenderer())
    return processors, structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Configure structlog and route it through the stdlib root logger.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
        environment: ``production`` selects the JSON renderer
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors, renderer = build_processors(environment)

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=processors)
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    for name, third_party_level in THIRD_PARTY_LEVELS.items():
        logging.getLogger(name).setLevel(third_party_level)

    structlog.get_logger(__name__).debug(
        "Logging configured",
        log_level=logging.getLevelName(level),
        environment=environment,
    )

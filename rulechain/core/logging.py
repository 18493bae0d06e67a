"""Structured logging for rulechain.

The library only emits events; applications decide where they go. Every
logger is a structlog wrapper around the stdlib logger of the same name, and
the "rulechain" logger carries a NullHandler, so nothing is printed until the
host configures logging. configure_logging() attaches a console (dev) or JSON
(prod) handler to the "rulechain" logger and routes structlog through it.

Events are snake_case names with keyword fields:

    log = schema_logger()
    log.warning("schema_configuration_rejected", code="E7001_INVALID_BOUND", combinator="min")
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from rulechain.core.config import get_settings

_ROOT = "rulechain"
SENSITIVE_KEYS = frozenset({"password", "token", "secret", "authorization", "cookie", "api_key"})
REDACTED = "[REDACTED]"
_MAX_DEPTH = 5

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def _scrub(obj, depth: int = 0):
    if depth > _MAX_DEPTH:
        return obj
    if isinstance(obj, dict):
        return {k: REDACTED if isinstance(k, str) and k.lower() in SENSITIVE_KEYS else _scrub(v, depth + 1)
            for k, v in obj.items()}
    if isinstance(obj, list):
        return [_scrub(item, depth + 1) for item in obj]
    return obj


def _censor_sensitive_keys(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace values stored under sensitive keys, at any nesting depth up to five."""
    return _scrub(event_dict)


def _add_library_info(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("library", _ROOT)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors run for both structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
        _censor_sensitive_keys,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Route rulechain events to stdout.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to the LOG_LEVEL setting
        json_logs: JSON lines when True, colored console output otherwise;
            defaults to the LOG_JSON setting
    """
    settings = get_settings()
    level = level if level is not None else settings.LOG_LEVEL
    json_logs = json_logs if json_logs is not None else settings.LOG_JSON
    shared = get_shared_processors()
    renderer = (structlog.processors.JSONRenderer() if json_logs
        else structlog.dev.ConsoleRenderer(colors=True, exception_formatter=structlog.dev.plain_traceback))

    structlog.configure(
        processors=[*shared, structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    ))

    library_logger = logging.getLogger(_ROOT)
    library_logger.handlers = [handler]
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Structlog logger whose output follows the stdlib handlers of `name`."""
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def bind_context(**kwargs) -> None:
    """Attach fields to every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


class LoggerRegistry:
    """One shared logger per library domain."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, domain: str) -> structlog.stdlib.BoundLogger:
        if domain not in cls._loggers:
            cls._loggers[domain] = get_logger(f"{_ROOT}.{domain}")
        return cls._loggers[domain]


def schema_logger() -> structlog.stdlib.BoundLogger:
    """Schema construction and type registry events."""
    return LoggerRegistry.get("schema")


def validation_logger() -> structlog.stdlib.BoundLogger:
    """Top-level validation events."""
    return LoggerRegistry.get("validation")

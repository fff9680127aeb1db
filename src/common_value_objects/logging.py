"""
Structured logging using structlog with:
- JSON/console switchable format
- PII redaction (emails, E.164/NANP phone numbers)
- Idempotent setup; importing the library never configures logging

Library modules only call get_logger(__name__); applications embedding the
value objects call setup_logging() once at startup if they want this
configuration.
"""

from __future__ import annotations

import datetime
import logging
import logging.config
import re
import sys
from typing import Any, Iterable, Optional

import structlog
from pythonjsonlogger.json import JsonFormatter

from common_value_objects.config import Settings, get_settings

# ---------------------------------------------------------------------
# PII redaction
# ---------------------------------------------------------------------


class PIIRedactionProcessor:
    """
    Structlog processor to redact PII from strings inside event_dict (recursively).
    - Email: keep domain, redact local-part.
    - Phone (E.164 or NANP normalized/display forms): keep prefix and last 4.
    """
    P_EMAIL = re.compile(r"\b([A-Za-z0-9._%+-]+)@([A-Za-z0-9.-]+\.[A-Za-z]{2,})\b")
    # E.164 and the 11-digit normalized form: optional + then 8..15 digits
    P_MSISDN = re.compile(r"\+?[1-9]\d{7,14}")
    # Display forms like (801) 555-1212 or 801.555.1212
    P_PHONE = re.compile(r"(?:\+?1[-.\s]?)?\(?\b\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b")

    def __call__(self, logger, method_name, event_dict):
        return self._redact(event_dict)

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: self._redact(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._redact(v) for v in value]
        if isinstance(value, str):
            return self._redact_str(value)
        return value

    def _redact_str(self, s: str) -> str:
        s = self.P_EMAIL.sub(lambda m: f"***@{m.group(2)}", s)

        def _mask_msisdn(m: re.Match) -> str:
            g = m.group(0)
            return f"{g[:2]}****{g[-4:]}" if len(g) >= 6 else "***"

        s = self.P_MSISDN.sub(_mask_msisdn, s)
        s = self.P_PHONE.sub(_mask_msisdn, s)
        return s


def _passthrough(logger, method_name, event_dict):
    return event_dict


def add_timestamp(logger, method_name, event_dict):
    # UTC ISO8601 Z
    now = datetime.datetime.now(datetime.timezone.utc)
    event_dict["timestamp"] = now.strftime("%Y-%m-%dT%H:%M:%SZ")
    return event_dict


# ---------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------

def _level_name_to_int(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def build_processors(settings: Settings) -> list[Any]:
    """structlog processor chain for the given settings."""
    is_prod_like = settings.is_prod or settings.is_staging
    processors: Iterable[Any] = [
        structlog.contextvars.merge_contextvars,
        add_timestamp,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        # Redact only outside of local/dev to help debugging locally
        (PIIRedactionProcessor() if is_prod_like else _passthrough),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        (structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer()),
    ]
    return list(processors)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Idempotent structured logging configuration."""
    settings = settings or get_settings()
    log_format = settings.log_format

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JsonFormatter,
                "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            },
            "console": {
                "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if log_format == "json" else "console",
                "stream": sys.stdout,
            },
        },
        "root": {
            "level": _level_name_to_int(settings.LOG_LEVEL),
            "handlers": ["console"],
        },
    }
    logging.config.dictConfig(logging_config)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)

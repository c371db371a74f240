"""
Logging setup.

Everything goes to one stdout handler, either as JSON (python-json-logger)
or as plain text. When structured logging is enabled, structlog loggers
share the same pipeline and receive the request context and redaction
processors below.

Request-scoped values live in two context variables, ``request_id`` and
``user_id``, set by the request middleware and the auth dependency.
"""

import logging
import re
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, MutableMapping, Optional, Tuple

import structlog
from pythonjsonlogger import jsonlogger

from hotel_booking.config.settings import settings

request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
user_id: ContextVar[Optional[str]] = ContextVar('user_id', default=None)

SERVICE_NAME = 'hotel-booking'
REDACTED = '[REDACTED]'
# a key is sensitive when one of its words is listed, or when it is listed whole
SENSITIVE_WORDS = frozenset({
    'password', 'passwd', 'token', 'secret', 'credentials',
    'authorization', 'cookie',
})
SENSITIVE_KEYS = frozenset({'api_key', 'private_key', 'secret_key'})

_HANDLER_MARKER = '_hotel_booking_handler'
_CAMEL_BOUNDARY = re.compile(r'([a-z0-9])([A-Z])')
_WORD_SEPARATOR = re.compile(r'[^a-z0-9]+')


def is_sensitive(key: str) -> bool:
    """
    Whole-word check on snake_case, kebab-case or camelCase keys.

    ``access_token`` and ``apiKey`` match; ``sort_key`` and ``monkey_patch`` do not.
    """
    normalised = _CAMEL_BOUNDARY.sub(r'\1_\2', key).lower()
    words = [word for word in _WORD_SEPARATOR.split(normalised) if word]
    return '_'.join(words) in SENSITIVE_KEYS or any(word in SENSITIVE_WORDS for word in words)


def redact(data: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Mask values whose key names a credential, recursing into dicts."""
    for key, value in data.items():
        if is_sensitive(key):
            data[key] = REDACTED
        elif isinstance(value, dict):
            redact(value)
    return data


# structlog processors

def add_request_context(logger, method_name, event_dict):
    if request_id.get():
        event_dict['request_id'] = request_id.get()
    if user_id.get():
        event_dict['user_id'] = user_id.get()
    event_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
    event_dict['service'] = SERVICE_NAME
    event_dict['environment'] = settings.ENVIRONMENT
    return event_dict


def redact_event(logger, method_name, event_dict):
    return redact(event_dict)


# stdlib pieces

class ContextFilter(logging.Filter):
    """Stamp every record with the current request and user."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id.get() or '-'
        record.user_id = user_id.get()
        return True


class JsonFormatter(jsonlogger.JsonFormatter):

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.update(
            level=record.levelname,
            logger=record.name,
            location=f"{record.module}:{record.funcName}:{record.lineno}",
            service=SERVICE_NAME,
            request_id=getattr(record, 'request_id', None),
        )
        if getattr(record, 'user_id', None):
            log_record['user_id'] = record.user_id
        if record.exc_info and 'exc_info' not in log_record:
            log_record['exception'] = self.formatException(record.exc_info)


TEXT_FORMAT = '%(asctime)s %(levelname)-8s %(name)s [%(request_id)s] %(message)s'
JSON_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'


def _build_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(ContextFilter())
    if settings.LOG_FORMAT == 'json':
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def configure_stdlib_logging() -> None:
    level = getattr(logging, settings.LOG_LEVEL)
    root = logging.getLogger()
    root.setLevel(level)

    # calling twice must not duplicate output
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
    root.addHandler(_build_handler(level))

    quiet = {
        'uvicorn.access': logging.WARNING,
        'uvicorn.error': logging.INFO,
        'sqlalchemy.engine': logging.INFO if settings.LOG_SQL_QUERIES else logging.WARNING,
        'urllib3': logging.WARNING,
        'httpx': logging.WARNING,
    }
    for name, lib_level in quiet.items():
        logging.getLogger(name).setLevel(lib_level)


def configure_structlog() -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == 'json'
        else structlog.processors.KeyValueRenderer(key_order=['event'])
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            add_request_context,
            redact_event,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


class ContextLogger(logging.LoggerAdapter):
    """
    Adapter used throughout the package.

    ``extra`` passed on a call is merged with the adapter's bound context
    and redacted before it reaches the record.
    """

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None):
        super().__init__(logger, dict(context or {}))

    def bind(self, **context: Any) -> 'ContextLogger':
        return ContextLogger(self.logger, {**self.extra, **context})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = {**self.extra, **(kwargs.get('extra') or {})}
        kwargs['extra'] = redact(extra)
        return msg, kwargs


def get_logger(name: Optional[str] = None) -> ContextLogger:
    return ContextLogger(logging.getLogger(name or 'hotel_booking'))


def setup_logging() -> None:
    """Configure logging for the process. Safe to call more than once."""
    if settings.ENABLE_STRUCTURED_LOGGING:
        configure_structlog()
    configure_stdlib_logging()

    get_logger(__name__).info('Logging configured', extra={
        'log_level': settings.LOG_LEVEL,
        'log_format': settings.LOG_FORMAT,
        'structured_logging': settings.ENABLE_STRUCTURED_LOGGING,
    })


__all__ = [
    'ContextLogger',
    'get_logger',
    'setup_logging',
    'is_sensitive',
    'redact',
    'request_id',
    'user_id',
]

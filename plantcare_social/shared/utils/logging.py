# 📄 File: plantcare_social/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up how the app writes its diary: every line says which request it belongs to
# and which user was acting, so a single problem can be followed from start to end.

# 🧪 Purpose (Technical Summary):
# Configures standard-library logging through dictConfig with either a contextual text
# formatter or python-json-logger's JsonFormatter. Request and identity context travel
# through contextvars and are stamped onto every record by a logging filter.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging / logging.config: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: plantcare_social.main (startup), api.middleware.logging (request context),
# api.realtime (socket identity context), shared.core.background (error sink)

import logging
import logging.config
import os
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger import jsonlogger

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'plantcare-social'

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
JSON_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s %(user_id)s %(service)s'


class ContextFilter(logging.Filter):
    """
    Stamps request id, acting identity and service metadata onto every record.

    Attached to handlers rather than loggers so third-party loggers get the
    same fields without any per-logger setup.
    """

    def __init__(self, name: str = ''):
        super().__init__(name)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('') or '-'
        record.user_id = user_id_var.get('')
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        return True


def build_logging_config(log_level: str, log_format: str) -> Dict[str, Any]:
    """Build the dictConfig mapping for the requested level and format."""
    if log_format == 'json':
        formatter = {
            '()': jsonlogger.JsonFormatter,
            'fmt': JSON_FORMAT,
            'rename_fields': {'asctime': 'timestamp', 'levelname': 'level', 'name': 'logger'},
        }
    else:
        formatter = {'format': TEXT_FORMAT}

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {
            'context': {'()': ContextFilter},
        },
        'formatters': {
            'default': formatter,
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stdout',
                'formatter': 'default',
                'filters': ['context'],
                'level': log_level,
            },
        },
        'root': {
            'level': log_level,
            'handlers': ['console'],
        },
        'loggers': {
            'aiohttp': {'level': 'WARNING'},
            'asyncio': {'level': 'WARNING'},
            'sqlalchemy.engine': {'level': 'WARNING'},
            'uvicorn.access': {'level': 'WARNING'},
        },
    }


def setup_logging(settings) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        settings: Application settings carrying LOG_LEVEL and LOG_FORMAT

    Returns:
        logging.Logger: The startup logger
    """
    logging.config.dictConfig(build_logging_config(settings.LOG_LEVEL, settings.LOG_FORMAT))
    return logging.getLogger('startup')


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier, generated when omitted
        user_id: Acting identity
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')

    try:
        yield {'request_id': request_id, 'user_id': user_id}
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def bind_user(user_id: str) -> None:
    """Attach the authenticated identity to the current logging context."""
    user_id_var.set(user_id)


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    """Log application startup event."""
    logging.getLogger('startup').info(
        f"Service {service_name} starting up",
        extra={'event_type': 'service_startup', 'version': version, **(extra or {})}
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    """Log application shutdown event."""
    logging.getLogger('shutdown').info(
        f"Service {service_name} shutting down",
        extra={'event_type': 'service_shutdown', **(extra or {})}
    )


def log_health_check(component: str, status: str, extra: Optional[Dict] = None):
    """Log health check results."""
    level = logging.INFO if status == 'healthy' else logging.WARNING
    logging.getLogger('health').log(
        level,
        f"Health check for {component}: {status}",
        extra={'event_type': 'health_check', 'component': component, **(extra or {})}
    )

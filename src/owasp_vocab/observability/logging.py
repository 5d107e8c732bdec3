"""Structured logging configuration for security events.

Configures structlog for JSON-formatted, request-ID-correlated logging.
Records emitted through :func:`owasp_vocab.observability.log_security_event`
come out in the shape the OWASP vocabulary expects::

    {"event": "authn_login_fail:joebob1", "description": "...",
     "level": "warning", "appid": "foobar.netportal_auth",
     "request_id": "...", "timestamp": "..."}

Usage::

    from owasp_vocab.observability.logging import configure_logging, get_logger

    configure_logging()  # Call once at app startup
    logger = get_logger()
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar

import structlog

from owasp_vocab.config import LoggingConfig, load_logging_config

# Context variable for request-scoped correlation ID.
request_id_ctx: ContextVar[str | None] = ContextVar('request_id', default=None)

_active_config: LoggingConfig | None = None


def _add_request_id(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict,
) -> dict:
    """Inject the current request_id from context into every log entry."""
    rid = request_id_ctx.get()
    if rid is not None:
        event_dict['request_id'] = rid
    return event_dict


class AppIdProcessor:
    """Add a fixed ``appid`` to every entry that does not already carry one."""

    def __init__(self, app_id: str | None) -> None:
        self.app_id = app_id

    def __call__(
        self,
        logger: logging.Logger,
        method_name: str,
        event_dict: dict,
    ) -> dict:
        if self.app_id is not None:
            event_dict.setdefault('appid', self.app_id)
        return event_dict


def build_processors(config: LoggingConfig) -> list:
    """Return the shared processor chain for a configuration."""
    return [
        structlog.contextvars.merge_contextvars,
        _add_request_id,
        AppIdProcessor(config.app_id),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    level: str | None = None,
    json_output: bool | None = None,
    app_id: str | None = None,
    force: bool = False,
) -> LoggingConfig:
    """Configure structlog and stdlib logging.

    Args:
        level: Log level name. Defaults to OWASP_VOCAB_LOG_LEVEL / LOG_LEVEL
            env vars or INFO. ``WARN`` is accepted.
        json_output: If True, emit JSON lines. If False, emit
            human-readable console output. Defaults to LOG_FORMAT
            env var == "json".
        app_id: Value for the ``appid`` field. Defaults to APP_ID env var.
        force: Reconfigure even if already configured.

    Returns:
        The active configuration. A repeated call without ``force``
        returns the first configuration and ignores its arguments.

    Raises:
        ConfigError: If the level or format is invalid.
    """
    global _active_config
    if _active_config is not None and not force:
        return _active_config
    config = load_logging_config(level=level, json_output=json_output, app_id=app_id)

    if config.json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *build_processors(config),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.level))
    _active_config = config
    return config


def reset_logging() -> None:
    """Forget previous configuration so the next call reconfigures."""
    global _active_config
    _active_config = None
    structlog.reset_defaults()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given name."""
    return structlog.get_logger(name)

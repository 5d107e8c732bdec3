"""Emit vocabulary events through a caller-supplied structlog logger.

The vocabulary string becomes the structlog ``event`` key and the human
readable message goes into ``description``, which is the record shape
the OWASP Logging Vocabulary Cheat Sheet shows. The caller picks the
level; nothing here routes on event kind.

Usage::

    from owasp_vocab import authn_login_fail
    from owasp_vocab.observability import get_logger, log_security_event

    logger = get_logger(__name__)
    log_security_event(
        logger,
        authn_login_fail(user_id),
        f'User {user_id} login failed',
        level='WARN',
    )
"""

from __future__ import annotations

from typing import Any

from owasp_vocab.catalog import event_kind
from owasp_vocab.errors import InvalidLevelError, ReservedFieldError

from .metrics import SECURITY_EVENTS_LOGGED

# OWASP level names -> structlog method names.
LEVEL_METHODS: dict[str, str] = {
    'DEBUG': 'debug',
    'INFO': 'info',
    'WARN': 'warning',
    'WARNING': 'warning',
    'ERROR': 'error',
    'CRITICAL': 'critical',
}

# Keys the record itself sets; extra fields may not reuse them.
RESERVED_FIELDS = frozenset({'event', 'description'})


def resolve_level(level: str) -> str:
    """Map an OWASP or stdlib level name to a logger method name.

    Raises:
        InvalidLevelError: If the name is not recognised.
    """
    try:
        return LEVEL_METHODS[level.strip().upper()]
    except KeyError:
        raise InvalidLevelError(
            f'Invalid level {level!r}; must be one of {", ".join(LEVEL_METHODS)}'
        ) from None


def log_security_event(
    logger: Any,
    event: str,
    description: str,
    /,
    *,
    level: str = 'WARN',
    **fields: Any,
) -> str:
    """Log one security event and return the event string.

    Args:
        logger: Any structlog-style logger exposing ``info``/``warning``/...
            methods that take the event as first argument.
        event: A rendered vocabulary string, e.g. ``authn_login_fail:joebob1``.
        description: Human readable message for the ``description`` field.
        level: OWASP level name (``INFO``, ``WARN``, ``CRITICAL``) or a
            stdlib name.
        **fields: Extra fields added to the record. ``event`` and
            ``description`` are reserved.

    Raises:
        InvalidLevelError: If ``level`` is not recognised.
        ReservedFieldError: If ``fields`` uses a reserved name.
    """
    reserved = RESERVED_FIELDS.intersection(fields)
    if reserved:
        raise ReservedFieldError(
            f'Reserved field name(s): {", ".join(sorted(reserved))}'
        )
    method = resolve_level(level)
    getattr(logger, method)(event, description=description, **fields)
    SECURITY_EVENTS_LOGGED.labels(kind=event_kind(event), level=method).inc()
    return event

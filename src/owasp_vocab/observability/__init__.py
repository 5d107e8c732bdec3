"""Observability helpers for emitting vocabulary events.

Provides structlog configuration, a Prometheus counter of logged
security events, and ``log_security_event`` to attach a vocabulary
string to a structured record.

Quick start::

    from owasp_vocab import authn_login_success
    from owasp_vocab.observability import configure_logging, get_logger, log_security_event

    configure_logging(app_id='foobar.netportal_auth')
    logger = get_logger(__name__)
    log_security_event(logger, authn_login_success('joebob1'),
                       'User joebob1 login successfully', level='INFO')
"""

from .logging import configure_logging, get_logger, request_id_ctx, reset_logging
from .metrics import SECURITY_EVENTS_LOGGED, metrics_text
from .security_log import log_security_event, resolve_level

__all__ = [
    'SECURITY_EVENTS_LOGGED',
    'configure_logging',
    'get_logger',
    'log_security_event',
    'metrics_text',
    'request_id_ctx',
    'reset_logging',
    'resolve_level',
]

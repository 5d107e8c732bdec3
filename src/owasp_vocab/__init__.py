"""OWASP Logging Vocabulary event formatters.

Each formatter renders one event string such as
``authn_login_fail:joebob1`` to attach as the ``event`` field of a
structured log record produced by the caller's own logger.

Quick start::

    from owasp_vocab import authn_login_fail, user_created

    authn_login_fail('joebob1')                        # 'authn_login_fail:joebob1'
    user_created('joebob1', 'user1', 'admin', ['a'])   # 'user_created:joebob1,user1,admin:a'

Structured logging helpers live in :mod:`owasp_vocab.observability`.
"""

from .catalog import (
    CATEGORIES,
    EVENT_CATALOG,
    EventSpec,
    event_kind,
    format_event,
    get_event_spec,
    specs_for_category,
    specs_for_kind,
)
from .errors import (
    ConfigError,
    InvalidLevelError,
    OwaspVocabError,
    ReservedFieldError,
    UnknownEventError,
)
from .popup import build_window_features, open_popup
from .scalars import Scalar
from .vocab import *  # noqa: F401,F403
from .vocab import __all__ as _vocab_all

__version__ = '0.1.0'

__all__ = [
    'CATEGORIES',
    'ConfigError',
    'EVENT_CATALOG',
    'EventSpec',
    'InvalidLevelError',
    'OwaspVocabError',
    'ReservedFieldError',
    'Scalar',
    'UnknownEventError',
    'build_window_features',
    'event_kind',
    'format_event',
    'get_event_spec',
    'open_popup',
    'specs_for_category',
    'specs_for_kind',
    *_vocab_all,
]

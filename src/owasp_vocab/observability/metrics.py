"""Prometheus metrics for security events.

Usage::

    from owasp_vocab.observability.metrics import SECURITY_EVENTS_LOGGED, metrics_text

    SECURITY_EVENTS_LOGGED.labels(kind='authn_login_fail', level='warning').inc()
"""

from __future__ import annotations

from prometheus_client import (
    REGISTRY,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

# ``kind`` is the literal event prefix, never the full event string,
# so label cardinality is bounded by the vocabulary.
SECURITY_EVENTS_LOGGED = Counter(
    'owasp_vocab_security_events_total',
    'Security events logged by event kind and level.',
    labelnames=['kind', 'level'],
    registry=REGISTRY,
)


def metrics_text() -> tuple[bytes, str]:
    """Generate Prometheus exposition text and content-type header."""
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST

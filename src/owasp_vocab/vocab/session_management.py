"""Session management events (``session_*``)."""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def session_created(user_id: Scalar) -> str:
    """A new authenticated session was created. Level ``INFO``."""
    return f'session_created:{user_id}'


def session_renewed(user_id: Scalar) -> str:
    """A user chose to extend a session about to expire. Level ``INFO``."""
    return f'session_renewed:{user_id}'


def session_expired(user_id: Scalar, reason: Scalar) -> str:
    """A session expired. Level ``INFO``.

    ``reason`` is free-form: logout, timeout, revoked, etc.
    """
    return f'session_expired:{user_id},{reason}'


def session_use_after_expire(user_id: Scalar) -> str:
    """An expired session was used. Level ``WARN``.

    Combined with later login failures this can point to session hijacking.
    """
    return f'session_use_after_expire:{user_id}'


__all__ = [
    'session_created',
    'session_expired',
    'session_renewed',
    'session_use_after_expire',
]

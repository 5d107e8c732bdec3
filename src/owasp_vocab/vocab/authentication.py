"""Authentication events (``authn_*``).

Login success and failure, lockouts, password changes, and the
lifecycle of service tokens.

Usage::

    from owasp_vocab.vocab.authentication import authn_login_fail

    logger.warning(authn_login_fail(user_id), description=f'User {user_id} login failed')
"""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def authn_login_success(user_id: Scalar) -> str:
    """All login events should be recorded including success. Level ``INFO``."""
    return f'authn_login_success:{user_id}'


def authn_login_successafterfail(user_id: Scalar, retries: Scalar) -> str:
    """The user successfully logged in after previously failing. Level ``INFO``.

    Example::

        >>> authn_login_successafterfail('joebob1', 2)
        'authn_login_successafterfail:joebob1,2'
    """
    return f'authn_login_successafterfail:{user_id},{retries}'


def authn_login_fail(user_id: Scalar) -> str:
    """All login events should be recorded including failure. Level ``WARN``."""
    return f'authn_login_fail:{user_id}'


def authn_login_fail_max(user_id: Scalar, max_limit: Scalar | None = None) -> str:
    """The user reached the maximum number of failed logins. Level ``WARN``.

    ``max_limit`` is omitted from the output only when it is ``None``;
    ``0`` still renders as ``,0``.
    """
    if max_limit is None:
        return f'authn_login_fail_max:{user_id}'
    return f'authn_login_fail_max:{user_id},{max_limit}'


def authn_login_lock(user_id: Scalar, reason: Scalar | None = None) -> str:
    """An account was locked after retries or some other condition. Level ``WARN``.

    Conventional reasons:
        maxretries: The maximum number of retries was reached.
        suspicious: Suspicious activity was observed on the account.
        customer: The customer requested their account be locked.
        other: Other.
    """
    if reason is None:
        return f'authn_login_lock:{user_id}'
    return f'authn_login_lock:{user_id},{reason}'


def authn_password_change(user_id: Scalar) -> str:
    """Every password change should be logged, including the userid it was for."""
    return f'authn_password_change:{user_id}'


def authn_password_change_fail(user_id: Scalar) -> str:
    """An attempt to change a password failed.

    May also trigger other events such as :func:`authn_login_lock`.
    """
    return f'authn_password_change_fail:{user_id}'


def authn_impossible_travel(
    user_id: Scalar,
    location1: Scalar,
    location2: Scalar,
) -> str:
    """A user appeared in two locations too far apart to travel between.

    This often indicates a potential account takeover. Level ``CRITICAL``.
    """
    return f'authn_impossible_travel:{user_id},{location1},{location2}'


def authn_token_created(user_id: Scalar, *entitlements: Scalar) -> str:
    """A token was created for service access. Level ``INFO``.

    Entitlements are joined with ``,`` directly after the user id, so a
    call with no entitlements ends in a bare comma. Entitlements may be
    strings or ints.

    Example::

        >>> authn_token_created('app.foobarapi.prod', 'create', 'read', 'update')
        'authn_token_created:app.foobarapi.prod,create,read,update'
    """
    return f'authn_token_created:{user_id},{",".join(map(str, entitlements))}'


def authn_token_revoked(user_id: Scalar, token_id: Scalar | None = None) -> str:
    """A token has been revoked for the given account. Level ``INFO``."""
    if token_id is None:
        return f'authn_token_revoked:{user_id}'
    return f'authn_token_revoked:{user_id},{token_id}'


def authn_token_reuse(user_id: Scalar, token_id: Scalar | None = None) -> str:
    """A previously revoked token was used again. Level ``CRITICAL``."""
    if token_id is None:
        return f'authn_token_reuse:{user_id}'
    return f'authn_token_reuse:{user_id},{token_id}'


def authn_token_delete(app_id: Scalar) -> str:
    """A token was deleted. Level ``WARN``."""
    return f'authn_token_delete:{app_id}'


__all__ = [
    'authn_impossible_travel',
    'authn_login_fail',
    'authn_login_fail_max',
    'authn_login_lock',
    'authn_login_success',
    'authn_login_successafterfail',
    'authn_password_change',
    'authn_password_change_fail',
    'authn_token_created',
    'authn_token_delete',
    'authn_token_reuse',
    'authn_token_revoked',
]

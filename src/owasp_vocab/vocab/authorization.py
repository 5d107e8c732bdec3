"""Authorization events (``authz_*``)."""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def authz_fail(user_id: Scalar, resource: Scalar) -> str:
    """An attempt was made to access a resource which was unauthorized.

    Level ``CRITICAL``.
    """
    return f'authz_fail:{user_id},{resource}'


def authz_change(user_id: Scalar, from_: Scalar, to: Scalar) -> str:
    """The user or entity entitlements changed. Level ``WARN``.

    Example::

        >>> authz_change('joebob1', 'user', 'admin')
        'authz_change:joebob1,user,admin'
    """
    return f'authz_change:{user_id},{from_},{to}'


def authz_admin(user_id: Scalar, event: Scalar) -> str:
    """Activity by a privileged user such as an admin. Level ``WARN``."""
    return f'authz_admin:{user_id},{event}'


__all__ = ['authz_admin', 'authz_change', 'authz_fail']

"""User management events (``user_*``).

``user_created`` and ``user_updated`` take an optional list of privilege
attributes rendered after the role:

- ``attributes=None`` renders ``user_created:<user>,<new user>,<role>``
- ``attributes=[]`` renders ``user_created:<user>,<new user>,<role>:``
- ``attributes=['a', 'b']`` renders ``user_created:<user>,<new user>,<role>:a,b``
"""

from __future__ import annotations

from typing import Sequence

from owasp_vocab.scalars import Scalar


def _with_attributes(prefix: str, attributes: Sequence[Scalar] | None) -> str:
    if attributes is None:
        return prefix
    return f'{prefix}:{",".join(map(str, attributes))}'


def user_created(
    user_id: Scalar,
    new_user_id: Scalar,
    role: Scalar,
    attributes: Sequence[Scalar] | None = None,
) -> str:
    """A user was created, possibly with admin privileges. Level ``WARN``."""
    return _with_attributes(f'user_created:{user_id},{new_user_id},{role}', attributes)


def user_updated(
    user_id: Scalar,
    new_user_id: Scalar,
    role: Scalar,
    attributes: Sequence[Scalar] | None = None,
) -> str:
    """A user was updated, possibly with admin privileges. Level ``WARN``."""
    return _with_attributes(f'user_updated:{user_id},{new_user_id},{role}', attributes)


def user_archived(user_id: Scalar, archived_user_id: Scalar) -> str:
    """A user was archived. Level ``WARN``.

    Archiving is preferred over deleting. A malicious user could still
    use it to deny service to legitimate users.
    """
    return f'user_archived:{user_id},{archived_user_id}'


def user_deleted(user_id: Scalar, deleted_user_id: Scalar) -> str:
    """A user was deleted. Level ``WARN``."""
    return f'user_deleted:{user_id},{deleted_user_id}'


__all__ = ['user_archived', 'user_created', 'user_deleted', 'user_updated']

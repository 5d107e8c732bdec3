"""Sensitive data change events (``sensitive_*``).

All four render a single space before the file or object, as in the
published vocabulary: ``sensitive_read:joebob1, /users/admin/secret``.
"""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def sensitive_create(user_id: Scalar, file_or_object: Scalar) -> str:
    """Sensitive data was created. Level ``WARN``."""
    return f'sensitive_create:{user_id}, {file_or_object}'


def sensitive_read(user_id: Scalar, file_or_object: Scalar) -> str:
    """Sensitive data was read. Level ``WARN``."""
    return f'sensitive_read:{user_id}, {file_or_object}'


def sensitive_update(user_id: Scalar, file_or_object: Scalar) -> str:
    """Sensitive data was updated. Level ``WARN``."""
    return f'sensitive_update:{user_id}, {file_or_object}'


def sensitive_delete(user_id: Scalar, file_or_object: Scalar) -> str:
    """Sensitive data was marked for deletion. Level ``WARN``.

    The data itself should be archived according to legal and privacy
    requirements rather than removed immediately.
    """
    return f'sensitive_delete:{user_id}, {file_or_object}'


__all__ = [
    'sensitive_create',
    'sensitive_delete',
    'sensitive_read',
    'sensitive_update',
]

"""Privilege change events."""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def privilege_permissions_changed(
    user_id: Scalar,
    file_or_object: Scalar,
    from_level: Scalar,
    to_level: Scalar,
) -> str:
    """Permissions changed on an access-controlled file or object.

    Level ``WARN``.

    The rendered kind is ``malicious_direct`` and a space follows the
    first comma. Both match the published vocabulary and are kept
    as-is for consumers that already parse them.

    Example::

        >>> privilege_permissions_changed('joebob1', '/users/admin/some/important/path', '0511', '0777')
        'malicious_direct:joebob1, /users/admin/some/important/path,0511,0777'
    """
    return f'malicious_direct:{user_id}, {file_or_object},{from_level},{to_level}'


__all__ = ['privilege_permissions_changed']

"""File upload events (``upload_*``).

Covers the upload lifecycle: completion, storage under a new name,
validation (type check, virus scan) and deletion.
"""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def upload_complete(
    user_id: Scalar,
    filename: Scalar,
    type: Scalar | None = None,  # noqa: A002
) -> str:
    """A file upload completed. Level ``INFO``.

    The optional ``type`` (e.g. a MIME type) is appended only when given.
    """
    if type is None:
        return f'upload_complete:{user_id},{filename}'
    return f'upload_complete:{user_id},{filename},{type}'


def upload_stored(filename: Scalar, to: Scalar) -> str:
    """An upload was moved or renamed to its storage location. Level ``INFO``."""
    return f'upload_stored:{filename},{to}'


def upload_validation(filename: Scalar, vendor: Scalar, status: Scalar) -> str:
    """An upload was validated for correctness or safety.

    Level ``INFO`` when validation passed, ``CRITICAL`` when it failed.
    ``vendor`` names the validator (virusscan, imagemagick, clamav...)
    and ``status`` is usually one of PASSED, INCOMPLETE or FAILED.
    """
    return f'upload_validation:{filename},{vendor},{status}'


def upload_delete(user_id: Scalar, file_id: Scalar) -> str:
    """A file was deleted for normal reasons. Level ``INFO``."""
    return f'upload_delete:{user_id},{file_id}'


__all__ = [
    'upload_complete',
    'upload_delete',
    'upload_stored',
    'upload_validation',
]

"""Input validation events."""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def input_validation_fail(field: Scalar, user_id: Scalar) -> str:
    """Server-side input validation failed. Level ``WARN``.

    Either client-side validation was missing or it was bypassed. Note
    the field name comes before the user id.
    """
    return f'input_validation_fail:{field},{user_id}'


__all__ = ['input_validation_fail']

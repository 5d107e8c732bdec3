"""Sequence error events."""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def sequence_fail(user_id: Scalar) -> str:
    """A user reached part of the application out of sequence. Level ``WARN``."""
    return f'sequence_fail:{user_id}'


__all__ = ['sequence_fail']

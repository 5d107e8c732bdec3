"""Excessive use events (``excess_*``)."""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def excess_rate_limit_exceeded(user_id: Scalar, max: Scalar) -> str:  # noqa: A002
    """A service limit ceiling was exceeded. Level ``WARN``.

    ``max`` is the configured ceiling, e.g. requests per hour.
    """
    return f'excess_rate_limit_exceeded:{user_id},{max}'


__all__ = ['excess_rate_limit_exceeded']

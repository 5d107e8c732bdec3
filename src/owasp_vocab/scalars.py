"""Shared type aliases for event formatters."""

from __future__ import annotations

# Python ints are arbitrary precision, so one alias covers both the
# "integer" and "big integer" cases.
Scalar = str | int

__all__ = ['Scalar']

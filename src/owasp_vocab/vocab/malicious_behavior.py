"""Malicious behavior events (``malicious_*``).

Two formatters render a kind that differs from their own name:
``malicious_excess_404`` renders ``malicious_excess404`` and
``malicious_direct_reference`` renders ``malicious_direct``. Downstream
consumers match on those exact strings.
"""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def malicious_excess_404(user_id_or_ip: Scalar, user_agent: Scalar) -> str:
    """Numerous requests for files that don't exist (force-browsing).

    Level ``WARN``.
    """
    return f'malicious_excess404:{user_id_or_ip},{user_agent}'


def malicious_extraneous(
    user_id_or_ip: Scalar,
    input_name: Scalar,
    user_agent: Scalar,
) -> str:
    """A backend handler received input it does not expect. Level ``WARN``."""
    return f'malicious_extraneous:{user_id_or_ip},{input_name},{user_agent}'


def malicious_attack_tool(
    user_id_or_ip: Scalar,
    tool_name: Scalar,
    user_agent: Scalar,
) -> str:
    """An attack tool was identified by signature or user agent.

    Level ``CRITICAL``.
    """
    return f'malicious_attack_tool:{user_id_or_ip},{tool_name},{user_agent}'


def malicious_cors(
    user_id_or_ip: Scalar,
    user_agent: Scalar,
    referer: Scalar,
) -> str:
    """A request arrived from an unauthorized origin. Level ``CRITICAL``.

    "referer" keeps the HTTP header's historical spelling.
    """
    return f'malicious_cors:{user_id_or_ip},{user_agent},{referer}'


def malicious_direct_reference(user_id_or_ip: Scalar, user_agent: Scalar) -> str:
    """An object was accessed directly without appropriate authority.

    Insecure Direct Object Reference. Level ``CRITICAL``.
    """
    return f'malicious_direct:{user_id_or_ip},{user_agent}'


__all__ = [
    'malicious_attack_tool',
    'malicious_cors',
    'malicious_direct_reference',
    'malicious_excess_404',
    'malicious_extraneous',
]

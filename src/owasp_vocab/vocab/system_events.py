"""System events (``sys_*``).

All system events are level ``WARN``. ``sys_restarted`` renders the
kind ``sys_restart``.
"""

from __future__ import annotations

from owasp_vocab.scalars import Scalar


def sys_startup(user_id: Scalar) -> str:
    return f'sys_startup:{user_id}'


def sys_shutdown(user_id: Scalar) -> str:
    return f'sys_shutdown:{user_id}'


def sys_restarted(user_id: Scalar) -> str:
    return f'sys_restart:{user_id}'


def sys_crash(reason: Scalar) -> str:
    """The system crashed, possibly as the result of an attack."""
    return f'sys_crash:{reason}'


def sys_monitor_disabled(user_id: Scalar, agent: Scalar) -> str:
    """A monitoring agent (file integrity, antivirus, logging...) was halted."""
    return f'sys_monitor_disabled:{user_id},{agent}'


def sys_monitor_enabled(user_id: Scalar, agent: Scalar) -> str:
    """A monitoring agent was started again after being stopped."""
    return f'sys_monitor_enabled:{user_id},{agent}'


__all__ = [
    'sys_crash',
    'sys_monitor_disabled',
    'sys_monitor_enabled',
    'sys_restarted',
    'sys_shutdown',
    'sys_startup',
]

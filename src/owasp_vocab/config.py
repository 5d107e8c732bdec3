"""Logging configuration for the security event helpers.

Configuration sources (in order):
  1. Explicit keyword arguments (tests, programmatic setup).
  2. Environment variables.
  3. Defaults: level ``INFO``, JSON output, no app id.

Configuration only affects how records are emitted by
``owasp_vocab.observability``. Event strings never depend on it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Mapping

from .errors import ConfigError

LogFormat = Literal['json', 'console']

VALID_LEVELS: tuple[str, ...] = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# WARN is the OWASP spelling; stdlib and structlog use WARNING.
_LEVEL_ALIASES = {'WARN': 'WARNING', 'FATAL': 'CRITICAL'}


# ── Configuration ───────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Immutable logging configuration.

    Attributes:
        level: Stdlib level name (``DEBUG`` ... ``CRITICAL``).
        json_output: Emit JSON lines when True, console output otherwise.
        app_id: Application identifier added to every record as
            ``appid`` (e.g. ``foobar.netportal_auth``). Omitted when None.
    """

    level: str = 'INFO'
    json_output: bool = True
    app_id: str | None = None


# ── Loading ─────────────────────────────────────────────────────────


def load_logging_config(
    *,
    level: str | None = None,
    json_output: bool | None = None,
    app_id: str | None = None,
    env: Mapping[str, str] | None = None,
) -> LoggingConfig:
    """Load logging config from env vars with optional overrides.

    Environment variables:
      - ``OWASP_VOCAB_LOG_LEVEL`` (falls back to ``LOG_LEVEL``).
      - ``LOG_FORMAT``: ``json`` or ``console``.
      - ``APP_ID``: value for the ``appid`` record field.

    Args:
        level: Override for the log level.
        json_output: Override for LOG_FORMAT.
        app_id: Override for APP_ID.
        env: Mapping to read instead of ``os.environ``.

    Raises:
        ConfigError: If the level or format is not recognised.
    """
    source = os.environ if env is None else env

    raw_level = level or source.get('OWASP_VOCAB_LOG_LEVEL') or source.get('LOG_LEVEL') or 'INFO'
    resolved_level = normalize_level(raw_level)

    if json_output is None:
        json_output = _resolve_format(source.get('LOG_FORMAT', 'json')) == 'json'

    resolved_app_id = app_id if app_id is not None else (source.get('APP_ID', '').strip() or None)

    return LoggingConfig(
        level=resolved_level,
        json_output=json_output,
        app_id=resolved_app_id,
    )


def normalize_level(raw: str) -> str:
    """Normalize a level name, accepting the OWASP ``WARN`` spelling.

    Raises:
        ConfigError: If the name is not a known level.
    """
    name = raw.strip().upper()
    name = _LEVEL_ALIASES.get(name, name)
    if name not in VALID_LEVELS:
        raise ConfigError(
            f'Invalid log level {raw!r}; must be one of {", ".join(VALID_LEVELS)}'
        )
    return name


# ── Private helpers ─────────────────────────────────────────────────


def _resolve_format(raw: str) -> LogFormat:
    value = raw.strip().lower()
    if value not in ('json', 'console'):
        raise ConfigError(f'Invalid LOG_FORMAT={raw!r}; must be json or console')
    return value  # type: ignore[return-value]

"""Error hierarchy for owasp_vocab.

Event formatters are total and never raise. Errors only come from the
lookup, configuration and logging helpers around them.
"""

from __future__ import annotations


class OwaspVocabError(Exception):
    """Base class for all owasp_vocab errors."""


class UnknownEventError(OwaspVocabError, KeyError):
    """Raised when a catalog lookup names an event that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'unknown event: {self.name!r}'


class ConfigError(OwaspVocabError, ValueError):
    """Raised when logging configuration is invalid."""


class InvalidLevelError(OwaspVocabError, ValueError):
    """Raised when a log level name is not one of the supported levels."""


class ReservedFieldError(OwaspVocabError, ValueError):
    """Raised when extra log fields reuse a name the record already sets."""

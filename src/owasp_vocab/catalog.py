"""Event catalog: every vocabulary formatter with its metadata.

Maps each formatter name to an :class:`EventSpec` describing the literal
kind it renders, its category, the OWASP-recommended level(s) and a
link to the matching section of the OWASP Logging Vocabulary Cheat
Sheet.

The catalog never changes how an event is rendered. ``format_event``
dispatches to the same function a caller would import directly.

Usage::

    from owasp_vocab.catalog import EVENT_CATALOG, format_event, get_event_spec

    spec = get_event_spec('authn_login_fail')
    spec.levels            # ('WARN',)
    format_event('authn_login_fail', 'joebob1')   # 'authn_login_fail:joebob1'
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from . import vocab
from .errors import UnknownEventError

CHEAT_SHEET_URL = (
    'https://cheatsheetseries.owasp.org/cheatsheets/'
    'Logging_Vocabulary_Cheat_Sheet.html'
)

# Ordered as in the cheat sheet.
CATEGORIES: tuple[str, ...] = (
    'authentication',
    'authorization',
    'excessive_use',
    'file_upload',
    'input_validation',
    'malicious_behavior',
    'privilege_changes',
    'sensitive_data_changes',
    'sequence_errors',
    'session_management',
    'system_events',
    'user_management',
)

INFO = ('INFO',)
WARN = ('WARN',)
CRITICAL = ('CRITICAL',)


# ── Event spec ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class EventSpec:
    """Metadata for one vocabulary event.

    Attributes:
        name: Formatter function name (also the catalog key).
        kind: Literal prefix the formatter renders before the first ``:``.
            Differs from ``name`` for a few events, e.g.
            ``sys_restarted`` renders ``sys_restart``.
        category: One of :data:`CATEGORIES`.
        levels: Recommended OWASP level names, most common first.
        description: One-line summary of when to emit the event.
        formatter: The pure function producing the event string.
        anchor: Fragment of the cheat sheet section for this event.
    """

    name: str
    kind: str
    category: str
    levels: tuple[str, ...]
    description: str
    formatter: Callable[..., str]
    anchor: str

    @property
    def reference_url(self) -> str:
        return f'{CHEAT_SHEET_URL}#{self.anchor}'

    def format(self, *args: Any, **kwargs: Any) -> str:
        return self.formatter(*args, **kwargs)


def _spec(
    formatter: Callable[..., str],
    category: str,
    levels: tuple[str, ...],
    description: str,
    anchor: str,
    *,
    kind: str | None = None,
) -> EventSpec:
    name = formatter.__name__
    return EventSpec(
        name=name,
        kind=kind or name,
        category=category,
        levels=levels,
        description=description,
        formatter=formatter,
        anchor=anchor,
    )


_SPECS: tuple[EventSpec, ...] = (
    # Authentication
    _spec(vocab.authn_login_success, 'authentication', INFO,
          'All login events should be recorded including success.',
          'authn_login_successuserid'),
    _spec(vocab.authn_login_successafterfail, 'authentication', INFO,
          'The user successfully logged in after previously failing.',
          'authn_login_successafterfailuseridretries'),
    _spec(vocab.authn_login_fail, 'authentication', WARN,
          'All login events should be recorded including failure.',
          'authn_login_failuserid'),
    _spec(vocab.authn_login_fail_max, 'authentication', WARN,
          'The user reached the maximum number of failed logins.',
          'authn_login_fail_maxuseridmaxlimitint'),
    _spec(vocab.authn_login_lock, 'authentication', WARN,
          'An account was locked after retries or another condition.',
          'authn_login_lockuseridreason'),
    _spec(vocab.authn_password_change, 'authentication', INFO,
          'Every password change should be logged.',
          'authn_password_changeuserid'),
    _spec(vocab.authn_password_change_fail, 'authentication', INFO,
          'An attempt to change a password failed.',
          'authn_password_change_failuserid'),
    _spec(vocab.authn_impossible_travel, 'authentication', CRITICAL,
          'A user appeared in two locations too far apart to travel between.',
          'authn_impossible_traveluseridregion1region2'),
    _spec(vocab.authn_token_created, 'authentication', INFO,
          'A token was created for service access.',
          'authn_token_createduserid-entitlements'),
    _spec(vocab.authn_token_revoked, 'authentication', INFO,
          'A token was revoked for the given account.',
          'authn_token_revokeduseridtokenid'),
    _spec(vocab.authn_token_reuse, 'authentication', CRITICAL,
          'A previously revoked token was used again.',
          'authn_token_reuseuseridtokenid'),
    _spec(vocab.authn_token_delete, 'authentication', WARN,
          'A token was deleted.',
          'authn_token_deleteappid'),
    # Authorization
    _spec(vocab.authz_fail, 'authorization', CRITICAL,
          'An attempt was made to access a resource which was unauthorized.',
          'authz_failuseridresource'),
    _spec(vocab.authz_change, 'authorization', WARN,
          'The user or entity entitlements changed.',
          'authz_changeuseridfromto'),
    _spec(vocab.authz_admin, 'authorization', WARN,
          'Activity by a privileged user such as an admin.',
          'authz_adminuseridevent'),
    # Excessive use
    _spec(vocab.excess_rate_limit_exceeded, 'excessive_use', WARN,
          'A service limit ceiling was exceeded.',
          'excess_rate_limit_exceededuseridmax'),
    # File upload
    _spec(vocab.upload_complete, 'file_upload', INFO,
          'A file upload completed.',
          'upload_completeuseridfilenametype'),
    _spec(vocab.upload_stored, 'file_upload', INFO,
          'An upload was moved or renamed to its storage location.',
          'upload_storedfilenamefromto'),
    _spec(vocab.upload_validation, 'file_upload', ('INFO', 'CRITICAL'),
          'An upload was validated for correctness or safety.',
          'upload_validationfilenamevirusscanimagemagickfailedincompletepassed'),
    _spec(vocab.upload_delete, 'file_upload', INFO,
          'A file was deleted for normal reasons.',
          'upload_deleteuseridfileid'),
    # Input validation
    _spec(vocab.input_validation_fail, 'input_validation', WARN,
          'Server-side input validation failed.',
          'input-validation-input'),
    # Malicious behavior
    _spec(vocab.malicious_excess_404, 'malicious_behavior', WARN,
          'Numerous requests for files that do not exist.',
          'malicious_excess_404useridipuseragent',
          kind='malicious_excess404'),
    _spec(vocab.malicious_extraneous, 'malicious_behavior', WARN,
          'A backend handler received input it does not expect.',
          'malicious_extraneoususeridipinputnameuseragent'),
    _spec(vocab.malicious_attack_tool, 'malicious_behavior', CRITICAL,
          'An attack tool was identified by signature or user agent.',
          'malicious_attack_tooluseridiptoolnameuseragent'),
    _spec(vocab.malicious_cors, 'malicious_behavior', CRITICAL,
          'A request arrived from an unauthorized origin.',
          'malicious_corsuseridipuseragentreferer'),
    _spec(vocab.malicious_direct_reference, 'malicious_behavior', CRITICAL,
          'An object was accessed directly without appropriate authority.',
          'malicious_direct_referenceuseridip-useragent',
          kind='malicious_direct'),
    # Privilege changes
    _spec(vocab.privilege_permissions_changed, 'privilege_changes', WARN,
          'Permissions changed on an access-controlled file or object.',
          'privilege_permissions_changeduseridfileobjectfromleveltolevel',
          kind='malicious_direct'),
    # Sensitive data changes
    _spec(vocab.sensitive_create, 'sensitive_data_changes', WARN,
          'Sensitive data was created.',
          'sensitive_createuseridfileobject'),
    _spec(vocab.sensitive_read, 'sensitive_data_changes', WARN,
          'Sensitive data was read.',
          'sensitive_readuseridfileobject'),
    _spec(vocab.sensitive_update, 'sensitive_data_changes', WARN,
          'Sensitive data was updated.',
          'sensitive_updateuseridfileobject'),
    _spec(vocab.sensitive_delete, 'sensitive_data_changes', WARN,
          'Sensitive data was marked for deletion.',
          'sensitive_deleteuseridfileobject'),
    # Sequence errors
    _spec(vocab.sequence_fail, 'sequence_errors', WARN,
          'A user reached part of the application out of sequence.',
          'sequence_failuserid'),
    # Session management
    _spec(vocab.session_created, 'session_management', INFO,
          'A new authenticated session was created.',
          'session_createduserid'),
    _spec(vocab.session_renewed, 'session_management', INFO,
          'A user chose to extend a session about to expire.',
          'session_reneweduserid'),
    _spec(vocab.session_expired, 'session_management', INFO,
          'A session expired.',
          'session_expireduseridreason'),
    _spec(vocab.session_use_after_expire, 'session_management', WARN,
          'An expired session was used.',
          'session_use_after_expireuserid'),
    # System events
    _spec(vocab.sys_startup, 'system_events', WARN,
          'The system was started.',
          'sys_startupuserid'),
    _spec(vocab.sys_shutdown, 'system_events', WARN,
          'The system was shut down.',
          'sys_shutdownuserid'),
    _spec(vocab.sys_restarted, 'system_events', WARN,
          'The system was restarted.',
          'sys_restartuserid',
          kind='sys_restart'),
    _spec(vocab.sys_crash, 'system_events', WARN,
          'The system crashed.',
          'sys_crashreason'),
    _spec(vocab.sys_monitor_disabled, 'system_events', WARN,
          'A monitoring agent was halted.',
          'sys_monitor_disableduseridmonitor'),
    _spec(vocab.sys_monitor_enabled, 'system_events', WARN,
          'A monitoring agent was started again after being stopped.',
          'sys_monitor_enableduseridmonitor'),
    # User management
    _spec(vocab.user_created, 'user_management', WARN,
          'A user was created.',
          'user_createduseridnewuseridattributesonetwothree'),
    _spec(vocab.user_updated, 'user_management', WARN,
          'A user was updated.',
          'user_updateduseridonuseridattributesonetwothree'),
    _spec(vocab.user_archived, 'user_management', WARN,
          'A user was archived.',
          'user_archiveduseridonuserid'),
    _spec(vocab.user_deleted, 'user_management', WARN,
          'A user was deleted.',
          'user_deleteduseridonuserid'),
)

EVENT_CATALOG: Mapping[str, EventSpec] = MappingProxyType(
    {spec.name: spec for spec in _SPECS},
)


# ── Lookup ───────────────────────────────────────────────────────────


def get_event_spec(name: str) -> EventSpec:
    """Return the spec for a formatter name.

    Raises:
        UnknownEventError: If no formatter has that name.
    """
    try:
        return EVENT_CATALOG[name]
    except KeyError:
        raise UnknownEventError(name) from None


def format_event(name: str, *args: Any, **kwargs: Any) -> str:
    """Render an event by formatter name."""
    return get_event_spec(name).format(*args, **kwargs)


def event_kind(event: str) -> str:
    """Return the literal kind prefix of a rendered event string."""
    return event.partition(':')[0]


def specs_for_kind(kind: str) -> list[EventSpec]:
    """Return every spec whose formatter renders ``kind``.

    Several formatters can share one kind (``malicious_direct``).
    """
    return [spec for spec in _SPECS if spec.kind == kind]


def specs_for_category(category: str) -> list[EventSpec]:
    return [spec for spec in _SPECS if spec.category == category]


__all__ = [
    'CATEGORIES',
    'CHEAT_SHEET_URL',
    'EVENT_CATALOG',
    'EventSpec',
    'event_kind',
    'format_event',
    'get_event_spec',
    'specs_for_category',
    'specs_for_kind',
]

"""OWASP Logging Vocabulary event formatters, one module per category."""

from .authentication import (
    authn_impossible_travel,
    authn_login_fail,
    authn_login_fail_max,
    authn_login_lock,
    authn_login_success,
    authn_login_successafterfail,
    authn_password_change,
    authn_password_change_fail,
    authn_token_created,
    authn_token_delete,
    authn_token_reuse,
    authn_token_revoked,
)
from .authorization import authz_admin, authz_change, authz_fail
from .excessive_use import excess_rate_limit_exceeded
from .file_upload import (
    upload_complete,
    upload_delete,
    upload_stored,
    upload_validation,
)
from .input_validation import input_validation_fail
from .malicious_behavior import (
    malicious_attack_tool,
    malicious_cors,
    malicious_direct_reference,
    malicious_excess_404,
    malicious_extraneous,
)
from .privilege_changes import privilege_permissions_changed
from .sensitive_data_changes import (
    sensitive_create,
    sensitive_delete,
    sensitive_read,
    sensitive_update,
)
from .sequence_errors import sequence_fail
from .session_management import (
    session_created,
    session_expired,
    session_renewed,
    session_use_after_expire,
)
from .system_events import (
    sys_crash,
    sys_monitor_disabled,
    sys_monitor_enabled,
    sys_restarted,
    sys_shutdown,
    sys_startup,
)
from .user_management import (
    user_archived,
    user_created,
    user_deleted,
    user_updated,
)

__all__ = [
    'authn_impossible_travel',
    'authn_login_fail',
    'authn_login_fail_max',
    'authn_login_lock',
    'authn_login_success',
    'authn_login_successafterfail',
    'authn_password_change',
    'authn_password_change_fail',
    'authn_token_created',
    'authn_token_delete',
    'authn_token_reuse',
    'authn_token_revoked',
    'authz_admin',
    'authz_change',
    'authz_fail',
    'excess_rate_limit_exceeded',
    'input_validation_fail',
    'malicious_attack_tool',
    'malicious_cors',
    'malicious_direct_reference',
    'malicious_excess_404',
    'malicious_extraneous',
    'privilege_permissions_changed',
    'sensitive_create',
    'sensitive_delete',
    'sensitive_read',
    'sensitive_update',
    'sequence_fail',
    'session_created',
    'session_expired',
    'session_renewed',
    'session_use_after_expire',
    'sys_crash',
    'sys_monitor_disabled',
    'sys_monitor_enabled',
    'sys_restarted',
    'sys_shutdown',
    'sys_startup',
    'upload_complete',
    'upload_delete',
    'upload_stored',
    'upload_validation',
    'user_archived',
    'user_created',
    'user_deleted',
    'user_updated',
]

"""Tests for authentication event formatters.

Validates:
  - Literal kind prefixes and field order
  - Optional arguments omitted only when None
  - Variadic entitlements joined with commas
"""

from __future__ import annotations

from owasp_vocab.vocab.authentication import (
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


# =====================================================================
# 1. Login
# =====================================================================


class TestLogin:

    def test_login_success(self, user_id):
        assert authn_login_success(user_id) == 'authn_login_success:user123'

    def test_login_success_after_fail(self, user_id):
        assert authn_login_successafterfail(user_id, 2) == 'authn_login_successafterfail:user123,2'

    def test_login_fail(self, user_id):
        assert authn_login_fail(user_id) == 'authn_login_fail:user123'

    def test_login_fail_max_without_limit(self, user_id):
        assert authn_login_fail_max(user_id) == 'authn_login_fail_max:user123'

    def test_login_fail_max_with_limit(self, user_id):
        assert authn_login_fail_max(user_id, 3) == 'authn_login_fail_max:user123,3'

    def test_login_fail_max_zero_limit_still_rendered(self, user_id):
        assert authn_login_fail_max(user_id, 0) == 'authn_login_fail_max:user123,0'

    def test_login_lock_without_reason(self, user_id):
        assert authn_login_lock(user_id) == 'authn_login_lock:user123'

    def test_login_lock_with_reason(self, user_id):
        assert authn_login_lock(user_id, 'maxretries') == 'authn_login_lock:user123,maxretries'

    def test_login_lock_empty_reason_keeps_separator(self, user_id):
        assert authn_login_lock(user_id, '') == 'authn_login_lock:user123,'

    def test_impossible_travel(self, user_id):
        result = authn_impossible_travel(user_id, 'location1', 'location2')
        assert result == 'authn_impossible_travel:user123,location1,location2'


# =====================================================================
# 2. Passwords
# =====================================================================


class TestPassword:

    def test_password_change(self, user_id):
        assert authn_password_change(user_id) == 'authn_password_change:user123'

    def test_password_change_fail(self, user_id):
        assert authn_password_change_fail(user_id) == 'authn_password_change_fail:user123'

    def test_password_change_numeric_user(self):
        assert authn_password_change(123) == 'authn_password_change:123'


# =====================================================================
# 3. Tokens
# =====================================================================


class TestTokens:

    def test_token_created_with_entitlements(self, user_id):
        result = authn_token_created(user_id, 'create', 'update')
        assert result == 'authn_token_created:user123,create,update'

    def test_token_created_from_unpacked_list(self, user_id):
        entitlements = ['create', 'read', 'update']
        result = authn_token_created(user_id, *entitlements)
        assert result == 'authn_token_created:user123,create,read,update'

    def test_token_created_single_entitlement(self, user_id):
        assert authn_token_created(user_id, 'read') == 'authn_token_created:user123,read'

    def test_token_created_no_entitlements_ends_with_comma(self, user_id):
        assert authn_token_created(user_id) == 'authn_token_created:user123,'

    def test_token_created_int_entitlements(self, user_id):
        assert authn_token_created(user_id, 1, 2) == 'authn_token_created:user123,1,2'
        assert authn_token_created(user_id, 1, 2) == authn_token_created(user_id, '1', '2')

    def test_token_created_big_int_entitlement(self, user_id):
        big = 10**20
        assert authn_token_created(user_id, big) == authn_token_created(user_id, str(big))

    def test_token_created_mixed_entitlements(self, user_id):
        assert authn_token_created(user_id, 'read', 7) == 'authn_token_created:user123,read,7'

    def test_token_revoked_without_token_id(self, user_id):
        assert authn_token_revoked(user_id) == 'authn_token_revoked:user123'

    def test_token_revoked_with_token_id(self, user_id):
        assert authn_token_revoked(user_id, 'token456') == 'authn_token_revoked:user123,token456'

    def test_token_reuse_without_token_id(self, user_id):
        assert authn_token_reuse(user_id) == 'authn_token_reuse:user123'

    def test_token_reuse_with_token_id(self, user_id):
        assert authn_token_reuse(user_id, 'token456') == 'authn_token_reuse:user123,token456'

    def test_token_reuse_numeric_token_id(self, user_id):
        assert authn_token_reuse(user_id, 0) == 'authn_token_reuse:user123,0'

    def test_token_delete(self):
        assert authn_token_delete('foobarapi') == 'authn_token_delete:foobarapi'

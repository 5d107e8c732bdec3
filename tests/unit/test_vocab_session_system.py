"""Tests for session management and system event formatters."""

from __future__ import annotations

from owasp_vocab.vocab.session_management import (
    session_created,
    session_expired,
    session_renewed,
    session_use_after_expire,
)
from owasp_vocab.vocab.system_events import (
    sys_crash,
    sys_monitor_disabled,
    sys_monitor_enabled,
    sys_restarted,
    sys_shutdown,
    sys_startup,
)


class TestSessionManagement:

    def test_created(self):
        assert session_created('joebob1') == 'session_created:joebob1'

    def test_renewed(self):
        assert session_renewed('joebob1') == 'session_renewed:joebob1'

    def test_expired(self):
        assert session_expired('joebob1', 'revoked') == 'session_expired:joebob1,revoked'

    def test_use_after_expire(self):
        assert session_use_after_expire('joebob1') == 'session_use_after_expire:joebob1'


class TestSystemEvents:

    def test_startup(self):
        assert sys_startup('joebob1') == 'sys_startup:joebob1'

    def test_shutdown(self):
        assert sys_shutdown('joebob1') == 'sys_shutdown:joebob1'

    def test_restarted_renders_sys_restart(self):
        assert sys_restarted('123') == 'sys_restart:123'

    def test_crash(self):
        assert sys_crash('outofmemory') == 'sys_crash:outofmemory'

    def test_monitor_disabled(self):
        assert sys_monitor_disabled('joebob1', 'crowdstrike') == 'sys_monitor_disabled:joebob1,crowdstrike'

    def test_monitor_enabled(self):
        assert sys_monitor_enabled('joebob1', 'crowdstrike') == 'sys_monitor_enabled:joebob1,crowdstrike'

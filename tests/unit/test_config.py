"""Tests for logging configuration loading."""

from __future__ import annotations

import pytest

from owasp_vocab.config import LoggingConfig, load_logging_config, normalize_level
from owasp_vocab.errors import ConfigError


class TestDefaults:

    def test_empty_env_gives_defaults(self):
        config = load_logging_config(env={})
        assert config == LoggingConfig(level='INFO', json_output=True, app_id=None)

    def test_config_is_frozen(self):
        config = load_logging_config(env={})
        with pytest.raises(AttributeError):
            config.level = 'DEBUG'  # type: ignore[misc]


class TestEnvironment:

    def test_reads_log_level(self):
        assert load_logging_config(env={'LOG_LEVEL': 'debug'}).level == 'DEBUG'

    def test_package_level_wins_over_generic(self):
        env = {'LOG_LEVEL': 'DEBUG', 'OWASP_VOCAB_LOG_LEVEL': 'ERROR'}
        assert load_logging_config(env=env).level == 'ERROR'

    def test_console_format(self):
        assert load_logging_config(env={'LOG_FORMAT': 'console'}).json_output is False

    def test_app_id(self):
        config = load_logging_config(env={'APP_ID': 'foobar.netportal_auth'})
        assert config.app_id == 'foobar.netportal_auth'

    def test_blank_app_id_is_none(self):
        assert load_logging_config(env={'APP_ID': '  '}).app_id is None

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv('LOG_LEVEL', 'ERROR')
        monkeypatch.delenv('OWASP_VOCAB_LOG_LEVEL', raising=False)
        assert load_logging_config().level == 'ERROR'


class TestOverrides:

    def test_kwargs_win_over_env(self):
        env = {'LOG_LEVEL': 'DEBUG', 'LOG_FORMAT': 'console', 'APP_ID': 'env-app'}
        config = load_logging_config(level='ERROR', json_output=True, app_id='kw-app', env=env)
        assert config == LoggingConfig(level='ERROR', json_output=True, app_id='kw-app')

    def test_explicit_format_skips_env_validation(self):
        config = load_logging_config(json_output=False, env={'LOG_FORMAT': 'xml'})
        assert config.json_output is False


class TestValidation:

    @pytest.mark.parametrize('raw, expected', [
        ('warn', 'WARNING'),
        ('WARN', 'WARNING'),
        (' info ', 'INFO'),
        ('fatal', 'CRITICAL'),
        ('critical', 'CRITICAL'),
    ])
    def test_normalize_level(self, raw, expected):
        assert normalize_level(raw) == expected

    def test_invalid_level(self):
        with pytest.raises(ConfigError, match='Invalid log level'):
            load_logging_config(env={'LOG_LEVEL': 'loud'})

    def test_invalid_format(self):
        with pytest.raises(ConfigError, match='LOG_FORMAT'):
            load_logging_config(env={'LOG_FORMAT': 'xml'})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_level('nope')

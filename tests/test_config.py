"""Tests for the configuration layer."""

import pytest

from zabbix_rpc.config import (
    debug_log,
    get_config,
    get_zabbix_api_url,
    reset_config,
    set_config,
)


class TestConfig:
    """Tests for get_config/set_config/reset_config."""

    def test_defaults(self):
        config = get_config()
        assert config['zabbix_url'] == ''
        assert config['zabbix_token'] is None
        assert config['login_field'] is None
        assert config['timeout'] == 30
        assert config['debug'] is False
        assert config['verify_ssl'] is True

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv('ZABBIX_URL', 'https://zabbix.example.com')
        monkeypatch.setenv('ZABBIX_TOKEN', 'abc')
        monkeypatch.setenv('ZABBIX_LOGIN_FIELD', 'user')
        monkeypatch.setenv('REQUEST_TIMEOUT', '5')
        monkeypatch.setenv('DEBUG', 'TRUE')
        monkeypatch.setenv('VERIFY_SSL', 'false')
        reset_config()

        config = get_config()
        assert config['zabbix_url'] == 'https://zabbix.example.com'
        assert config['zabbix_token'] == 'abc'
        assert config['login_field'] == 'user'
        assert config['timeout'] == 5
        assert config['debug'] is True
        assert config['verify_ssl'] is False

    def test_set_config_merges(self):
        set_config({'zabbix_url': 'https://a.example.com'})
        set_config({'zabbix_user': 'Admin'})

        config = get_config()
        assert config['zabbix_url'] == 'https://a.example.com'
        assert config['zabbix_user'] == 'Admin'

    def test_set_config_ignores_unknown_keys(self):
        set_config({'colour': 'blue'})
        assert 'colour' not in get_config()

    def test_set_config_rejects_login_field(self):
        with pytest.raises(ValueError):
            set_config({'login_field': 'email'})

    def test_reset(self):
        set_config({'zabbix_url': 'https://a.example.com'})
        reset_config()
        assert get_config()['zabbix_url'] == ''


class TestApiUrl:
    """Tests for get_zabbix_api_url()."""

    def test_appends_endpoint(self):
        assert get_zabbix_api_url('https://z.example.com') == 'https://z.example.com/api_jsonrpc.php'

    def test_strips_trailing_slash(self):
        assert get_zabbix_api_url('https://z.example.com/zabbix/') == 'https://z.example.com/zabbix/api_jsonrpc.php'

    def test_keeps_full_endpoint(self):
        url = 'https://z.example.com/api_jsonrpc.php'
        assert get_zabbix_api_url(url) == url

    def test_uses_configured_url(self):
        set_config({'zabbix_url': 'https://configured.example.com'})
        assert get_zabbix_api_url() == 'https://configured.example.com/api_jsonrpc.php'

    def test_not_configured(self):
        with pytest.raises(ValueError):
            get_zabbix_api_url()


class TestDebugLog:
    """Tests for debug_log()."""

    def test_silent_by_default(self, capsys):
        debug_log('hello')
        assert capsys.readouterr().out == ''

    def test_prefix_and_args(self, capsys):
        debug_log('Calling host.get', {'limit': 1}, enabled=True)
        assert capsys.readouterr().out == "[Zabbix API] Calling host.get {'limit': 1}\n"

    def test_follows_config(self, capsys):
        set_config({'debug': True})
        debug_log('on')
        assert '[Zabbix API] on' in capsys.readouterr().out

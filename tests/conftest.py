"""Shared pytest fixtures."""

import pytest

from fakes import FakeZabbix
from zabbix_rpc import Session
from zabbix_rpc.config import reset_config


@pytest.fixture
def zabbix() -> FakeZabbix:
    """Fake server; register replies with zabbix.on(method, ...)."""
    return FakeZabbix()


@pytest.fixture
def session(zabbix: FakeZabbix) -> Session:
    """Session that has not logged in and has not detected a version."""
    return Session('http://zabbix.test', http=zabbix.http)


@pytest.fixture
def api(session: Session) -> Session:
    """Session logged in to a 6.0 server."""
    session.version = 60000
    session.set_token('token-123')
    return session


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from ZABBIX_* variables of the environment."""
    for name in (
        'ZABBIX_URL', 'ZABBIX_TOKEN', 'ZABBIX_USER', 'ZABBIX_PASSWORD',
        'ZABBIX_LOGIN_FIELD', 'REQUEST_TIMEOUT', 'DEBUG', 'VERIFY_SSL',
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()

"""
Proxy Tools for Zabbix

The proxy name is "host" before 7.0 and "name" from 7.0; Proxy exposes it
as ``name`` whichever the server sent.

Example:
    from zabbix_rpc.proxy import proxy_get

    # Get all proxies
    proxies = proxy_get(session)
"""

from typing import Any, List, Optional

from pydantic import ValidationInfo, model_validator

from .session import Session
from .types import GetParams, ZabbixModel, context_version
from .utils import expect_one, with_default_output


# proxy.host was renamed to proxy.name in 7.0
PROXY_NAME_SINCE = 70000


class Proxy(ZabbixModel):
    """Proxy object"""
    proxyid: Optional[str] = None
    # "host" on the wire before 7.0
    name: Optional[str] = None

    @model_validator(mode='before')
    @classmethod
    def _resolve_name(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        host = data.pop('host', None)
        if host is not None and context_version(info) < PROXY_NAME_SINCE:
            data['name'] = host
        return data


class ProxyGetParams(GetParams, total=False):
    """Parameters for proxy.get API method"""
    proxyids: List[str]


def proxy_get(session: Session, params: Optional[ProxyGetParams] = None) -> List[Proxy]:
    """
    Get proxies from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of proxies
    """
    return session.invoke_and_decode('proxy.get', with_default_output(params), List[Proxy])


def proxy_get_by_id(session: Session, proxyid: str) -> Proxy:
    """Get the proxy with this id; raises ExpectedOneResult otherwise"""
    return expect_one(proxy_get(session, {'proxyids': [proxyid]}))

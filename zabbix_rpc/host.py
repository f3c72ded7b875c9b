"""
Host Management Tools for Zabbix

Hosts come back from host.get in a different shape depending on the server
version and on what the host has configured. The models below absorb that:
- interface "details" and host "inventory" are [] when empty and decode as None
- a missing "inventory_mode" means inventory is disabled
- the proxy id is "proxy_hostid" before 7.0 and "proxyid" from 7.0, exposed
  as a single proxy_id and written back under the right name

Example:
    from zabbix_rpc.host import Host, HostInterface, host_get, host_create
    from zabbix_rpc.types import HostGroupID

    # Get hosts in specific group
    group_hosts = host_get(session, {'groupids': ['1']})

    # Create a new host
    host = Host(
        host='server-01',
        groups=[HostGroupID(groupid='1')],
        interfaces=[HostInterface(type='1', ip='192.168.1.100', port='10050')],
    )
    host_create(session, [host])
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field, ValidationInfo, model_validator

from .enums import AvailableType, HostStatus, InterfaceType, InventoryMode
from .macro import Macro
from .session import Session
from .types import (
    EmptyAsNone,
    GetParams,
    HostGroupID,
    IntFromStr,
    StrFromNumber,
    TemplateID,
    ZabbixModel,
    context_version,
    version_field,
)
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


# host.proxy_hostid was renamed to host.proxyid in 7.0
PROXYID_SINCE = 70000


class HostInterfaceDetail(ZabbixModel):
    """SNMP details of a host interface"""
    version: Optional[str] = None
    bulk: Optional[str] = None
    community: Optional[str] = None
    securityname: Optional[str] = None
    securitylevel: Optional[str] = None
    authpassphrase: Optional[str] = None
    privpassphrase: Optional[str] = None
    authprotocol: Optional[str] = None
    privprotocol: Optional[str] = None
    contextname: Optional[str] = None


class HostInterface(ZabbixModel):
    """Host interface definition"""
    interfaceid: Optional[str] = None
    dns: str = ''
    ip: str = ''
    main: str = '1'
    port: str
    type: Annotated[InterfaceType, StrFromNumber]
    useip: str = '1'
    details: Annotated[Optional[HostInterfaceDetail], EmptyAsNone] = None


class Inventory(ZabbixModel):
    """Host inventory (subset)"""
    location: Optional[str] = None
    model: Optional[str] = None
    name: Optional[str] = None
    notes: Optional[str] = None


class Tag(ZabbixModel):
    tag: str
    value: str = ''


class Host(ZabbixModel):
    """Host object"""
    hostid: Optional[str] = None
    host: str
    name: Optional[str] = None
    status: Annotated[HostStatus, IntFromStr] = HostStatus.MONITORED
    macros: Optional[List[Macro]] = None
    tags: Optional[List[Tag]] = None

    inventory: Annotated[Optional[Inventory], EmptyAsNone] = None
    inventory_mode: Annotated[InventoryMode, IntFromStr] = InventoryMode.DISABLED

    # Only used when creating or updating
    groups: Optional[List[HostGroupID]] = None
    interfaces: Optional[List[HostInterface]] = None
    templates: Optional[List[TemplateID]] = None
    templates_clear: Optional[List[TemplateID]] = None

    # Read only
    available: Annotated[Optional[AvailableType], IntFromStr] = Field(default=None, exclude=True)
    error: Optional[str] = Field(default=None, exclude=True)
    parent_templates: Optional[List[TemplateID]] = Field(
        default=None, alias='parentTemplates', exclude=True
    )

    # proxy_hostid or proxyid on the wire, depending on the server version
    proxy_id: Optional[str] = Field(default=None, exclude=True)

    @model_validator(mode='before')
    @classmethod
    def _resolve_proxy_id(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        proxy_hostid = data.pop('proxy_hostid', None)
        proxyid = data.pop('proxyid', None)
        if data.get('proxy_id') is None:
            if context_version(info) >= PROXYID_SINCE:
                data['proxy_id'] = proxyid
            else:
                data['proxy_id'] = proxy_hostid
        return data

    def to_api(self, version: int = 0) -> Dict[str, Any]:
        data = self.model_dump_api()
        if self.proxy_id is not None:
            data[version_field(version, 'proxy_hostid', 'proxyid', PROXYID_SINCE)] = self.proxy_id
            if version >= PROXYID_SINCE:
                data['monitored_by'] = 0 if self.proxy_id in ('', '0') else 1
        return data


class HostGetParams(GetParams, total=False):
    """Parameters for host.get API method"""
    hostids: List[str]
    groupids: List[str]
    templateids: List[str]
    selectInterfaces: Any
    selectInventory: Any
    selectMacros: Any
    selectParentTemplates: Any
    selectTags: Any


def host_get(session: Session, params: Optional[HostGetParams] = None) -> List[Host]:
    """
    Get hosts from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of hosts

    Example:
        hosts = host_get(session, {'selectInterfaces': 'extend', 'limit': 10})
        for host in hosts:
            print(f"Host: {host.name}")
    """
    return session.invoke_and_decode('host.get', with_default_output(params), List[Host])


def host_get_by_hostgroup_ids(session: Session, groupids: List[str]) -> List[Host]:
    """Get the hosts of these host groups"""
    return host_get(session, {'groupids': groupids})


def host_get_by_hostgroups(session: Session, groups: List[Any]) -> List[Host]:
    """Get the hosts of these host groups (anything with a groupid)"""
    return host_get_by_hostgroup_ids(session, [group.groupid for group in groups])


def host_get_by_id(session: Session, hostid: str) -> Host:
    """Get the host with this id; raises ExpectedOneResult otherwise"""
    return expect_one(host_get(session, {'hostids': [hostid]}))


def host_get_by_host(session: Session, host: str) -> Host:
    """Get the host with this technical name; raises ExpectedOneResult otherwise"""
    return expect_one(host_get(session, {'filter': {'host': host}}))


def host_create(session: Session, hosts: List[Host]) -> List[str]:
    """
    Create new hosts in Zabbix

    Returns:
        The new host ids, also stored on each host
    """
    return create_records(session, 'host.create', hosts, 'hostids', 'hostid')


def host_update(session: Session, hosts: List[Host]) -> None:
    """Update existing hosts"""
    update_records(session, 'host.update', hosts)


def host_delete(session: Session, hosts: List[Host]) -> None:
    """Delete hosts, clearing their hostid on success"""
    delete_records(session, 'host.delete', hosts, 'hostids', 'hostid')


def host_delete_by_ids(session: Session, hostids: List[str]) -> List[str]:
    """
    Delete hosts from Zabbix

    Args:
        hostids: List of host IDs to delete

    Returns:
        The deleted host ids

    Raises:
        ExpectedMore: If the server deleted fewer hosts than requested
    """
    return delete_by_ids(session, 'host.delete', hostids, 'hostids', 'hostid')

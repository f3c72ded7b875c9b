"""
Host Group Management Tools for Zabbix

Example:
    from zabbix_rpc.hostgroup import HostGroup, hostgroup_get, hostgroup_create

    # Get all host groups
    groups = hostgroup_get(session)

    # Create a new host group; its groupid is filled in
    group = HostGroup(name='Web Servers')
    hostgroup_create(session, [group])
"""

from typing import Annotated, List, Optional

from pydantic import Field

from .enums import InternalType
from .session import Session
from .types import GetParams, IntFromStr, ZabbixModel
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


class HostGroup(ZabbixModel):
    """Host group object"""
    groupid: Optional[str] = None
    name: str
    # readonly
    internal: Annotated[Optional[InternalType], IntFromStr] = Field(default=None, exclude=True)


class HostgroupGetParams(GetParams, total=False):
    """Parameters for hostgroup.get API method"""
    groupids: List[str]
    hostids: List[str]


def hostgroup_get(session: Session, params: Optional[HostgroupGetParams] = None) -> List[HostGroup]:
    """
    Get host groups from Zabbix

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of host groups
    """
    return session.invoke_and_decode('hostgroup.get', with_default_output(params), List[HostGroup])


def hostgroup_get_by_id(session: Session, groupid: str) -> HostGroup:
    """Get the host group with this id; raises ExpectedOneResult otherwise"""
    return expect_one(hostgroup_get(session, {'groupids': [groupid]}))


def hostgroup_create(session: Session, groups: List[HostGroup]) -> List[str]:
    """
    Create host groups in Zabbix

    Returns:
        The new group ids, also stored on each group
    """
    return create_records(session, 'hostgroup.create', groups, 'groupids', 'groupid')


def hostgroup_update(session: Session, groups: List[HostGroup]) -> None:
    """Update existing host groups"""
    update_records(session, 'hostgroup.update', groups)


def hostgroup_delete(session: Session, groups: List[HostGroup]) -> None:
    """Delete host groups, clearing their groupid on success"""
    delete_records(session, 'hostgroup.delete', groups, 'groupids', 'groupid')


def hostgroup_delete_by_ids(session: Session, groupids: List[str]) -> List[str]:
    """
    Delete host groups from Zabbix

    Args:
        groupids: List of group IDs to delete

    Returns:
        The deleted group ids
    """
    return delete_by_ids(session, 'hostgroup.delete', groupids, 'groupids', 'groupid')

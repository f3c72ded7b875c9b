"""
Low-Level Discovery Rule Tools for Zabbix

Example:
    from zabbix_rpc.discovery import discoveryrule_get, discoveryrule_get_by_id

    # Get all discovery rules of a host
    rules = discoveryrule_get(session, {'hostids': ['10001']})
"""

from typing import Annotated, Any, List, Optional

from pydantic import Field

from .enums import ItemType
from .item import Preprocessor
from .session import Session
from .types import EmptyAsNone, GetParams, IntFromStr, ZabbixModel
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


class LLDRuleFilterCondition(ZabbixModel):
    macro: str
    value: str
    formulaid: Optional[str] = None
    operator: Optional[str] = None


class LLDRuleFilter(ZabbixModel):
    evaltype: Optional[str] = None
    formula: Optional[str] = None
    conditions: List[LLDRuleFilterCondition] = Field(default_factory=list)


class LLDRule(ZabbixModel):
    """LLD rule object"""
    itemid: Optional[str] = None
    delay: str = ''
    hostid: Optional[str] = None
    interfaceid: Optional[str] = None
    key: str = Field(alias='key_')
    name: str
    type: Annotated[ItemType, IntFromStr]
    authtype: Optional[str] = None
    description: str = ''
    ipmi_sensor: Optional[str] = None
    lifetime: Optional[str] = None
    params: Optional[str] = None
    privatekey: Optional[str] = None
    publickey: Optional[str] = None
    status: Optional[str] = None
    trapper_hosts: Optional[str] = None

    # SSH / telnet
    username: Optional[str] = None
    password: Optional[str] = None
    port: Optional[str] = None

    # HTTP agent
    url: Optional[str] = None
    request_method: Optional[str] = None
    allow_traps: Optional[str] = None
    post_type: Optional[str] = None
    posts: Optional[str] = None
    status_codes: Optional[str] = None
    timeout: Optional[str] = None
    verify_host: Optional[str] = None
    verify_peer: Optional[str] = None

    # SNMP
    snmp_oid: Optional[str] = None
    snmp_community: Optional[str] = None
    snmpv3_authpassphrase: Optional[str] = None
    snmpv3_authprotocol: Optional[str] = None
    snmpv3_contextname: Optional[str] = None
    snmpv3_privpassphrase: Optional[str] = None
    snmpv3_privprotocol: Optional[str] = None
    snmpv3_securitylevel: Optional[str] = None
    snmpv3_securityname: Optional[str] = None

    preprocessing: Optional[List[Preprocessor]] = None
    filter: Annotated[Optional[LLDRuleFilter], EmptyAsNone] = None

    # readonly
    error: Optional[str] = Field(default=None, exclude=True)


class DiscoveryruleGetParams(GetParams, total=False):
    """Parameters for discoveryrule.get API method"""
    itemids: List[str]
    hostids: List[str]
    templateids: List[str]
    selectFilter: Any
    selectPreprocessing: Any


def discoveryrule_get(session: Session, params: Optional[DiscoveryruleGetParams] = None) -> List[LLDRule]:
    """
    Get discovery rules from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of discovery rules
    """
    return session.invoke_and_decode('discoveryrule.get', with_default_output(params), List[LLDRule])


def discoveryrule_get_by_id(session: Session, itemid: str) -> LLDRule:
    """Get the discovery rule with this id; raises ExpectedOneResult otherwise"""
    return expect_one(discoveryrule_get(session, {'itemids': [itemid]}))


def discoveryrule_create(session: Session, rules: List[LLDRule]) -> List[str]:
    """Create discovery rules; returns the new ids, also stored on each rule"""
    return create_records(session, 'discoveryrule.create', rules, 'itemids', 'itemid')


def discoveryrule_update(session: Session, rules: List[LLDRule]) -> None:
    update_records(session, 'discoveryrule.update', rules)


def discoveryrule_delete(session: Session, rules: List[LLDRule]) -> None:
    """Delete discovery rules, clearing their itemid on success"""
    delete_records(session, 'discoveryrule.delete', rules, 'itemids', 'itemid')


def discoveryrule_delete_by_ids(session: Session, itemids: List[str]) -> List[str]:
    """Delete discovery rules by id; some versions acknowledge them as a map"""
    return delete_by_ids(session, 'discoveryrule.delete', itemids, 'itemids', 'itemid')

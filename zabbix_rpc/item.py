"""
Item Management Tools for Zabbix

Covers items and item prototypes, which share one object layout. Two fields
change shape between reads and writes:
- "applications" is written as a list of ids but read back as objects
- "headers" is a map, or [] when the item has none

Example:
    from zabbix_rpc.enums import ItemType, ValueType
    from zabbix_rpc.item import Item, item_get, item_create

    # Get all items for a host
    items = item_get(session, {'hostids': ['10001']})

    # Create a new monitoring item
    item = Item(name='CPU Load', key='system.cpu.load', hostid='10001',
                type=ItemType.ZABBIX_AGENT, value_type=ValueType.FLOAT, delay='60s')
    item_create(session, [item])
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BeforeValidator, Field

from .enums import DataType, DeltaType, ItemType, ValueType
from .session import Session
from .types import EmptyAsMap, EmptyAsNone, GetParams, IntFromStr, ZabbixModel, ids_from_objects
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


class Preprocessor(ZabbixModel):
    """Item preprocessing step"""
    type: Optional[str] = None
    params: str = ''
    error_handler: Optional[str] = None
    error_handler_params: str = ''


class ItemHost(ZabbixModel):
    """Host an item belongs to, as returned by selectHosts"""
    hostid: str
    host: Optional[str] = None
    name: Optional[str] = None


class ItemDiscoveryRule(ZabbixModel):
    """Parent LLD rule of a prototype, as returned by selectDiscoveryRule"""
    itemid: str
    name: Optional[str] = None
    key: Optional[str] = Field(default=None, alias='key_')


class Item(ZabbixModel):
    """Item object"""
    itemid: Optional[str] = None
    delay: str = ''
    hostid: Optional[str] = None
    interfaceid: Optional[str] = None
    key: str = Field(alias='key_')
    name: str
    type: Annotated[ItemType, IntFromStr]
    value_type: Annotated[ValueType, IntFromStr]
    data_type: Annotated[Optional[DataType], IntFromStr] = None
    delta: Annotated[Optional[DeltaType], IntFromStr] = None
    description: str = ''
    history: Optional[str] = None
    trends: Optional[str] = None
    trapper_hosts: Optional[str] = None
    params: Optional[str] = None

    applications: Annotated[
        Optional[List[str]], BeforeValidator(ids_from_objects('applicationid'))
    ] = None
    preprocessing: Optional[List[Preprocessor]] = None

    # HTTP agent
    url: Optional[str] = None
    request_method: Optional[str] = None
    post_type: Optional[str] = None
    posts: Optional[str] = None
    status_codes: Optional[str] = None
    timeout: Optional[str] = None
    verify_host: Optional[str] = None
    verify_peer: Optional[str] = None
    authtype: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    headers: Annotated[Optional[Dict[str, str]], EmptyAsMap] = None

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

    # Dependent items
    master_itemid: Optional[str] = None

    # Prototypes
    ruleid: Optional[str] = None

    # Read only
    error: Optional[str] = Field(default=None, exclude=True)
    hosts: Optional[List[ItemHost]] = Field(default=None, exclude=True)
    discovery_rule: Annotated[Optional[ItemDiscoveryRule], EmptyAsNone] = Field(
        default=None, alias='discoveryRule', exclude=True
    )


class ItemGetParams(GetParams, total=False):
    """Parameters for item.get and itemprototype.get API methods"""
    itemids: List[str]
    hostids: List[str]
    groupids: List[str]
    templateids: List[str]
    applicationids: List[str]
    discoveryids: List[str]
    selectHosts: Any
    selectApplications: Any
    selectPreprocessing: Any
    selectDiscoveryRule: Any


def items_by_key(items: List[Item]) -> Dict[str, Item]:
    """
    Index items by key

    Raises:
        ValueError: If two items share a key
    """
    res: Dict[str, Item] = {}
    for item in items:
        if item.key in res:
            raise ValueError(f'Duplicate key {item.key}')
        res[item.key] = item
    return res


def item_get(session: Session, params: Optional[ItemGetParams] = None) -> List[Item]:
    """
    Get items from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of items
    """
    return session.invoke_and_decode('item.get', with_default_output(params), List[Item])


def item_get_by_id(session: Session, itemid: str) -> Item:
    """Get the item with this id; raises ExpectedOneResult otherwise"""
    return expect_one(item_get(session, {'itemids': [itemid]}))


def item_get_by_application_id(session: Session, applicationid: str) -> List[Item]:
    """Get the items of an application (servers before 5.4)"""
    return item_get(session, {'applicationids': [applicationid]})


def item_create(session: Session, items: List[Item]) -> List[str]:
    """Create items; returns the new ids, also stored on each item"""
    return create_records(session, 'item.create', items, 'itemids', 'itemid')


def item_update(session: Session, items: List[Item]) -> None:
    """Update existing items"""
    update_records(session, 'item.update', items)


def item_delete(session: Session, items: List[Item]) -> None:
    """Delete items, clearing their itemid on success"""
    delete_records(session, 'item.delete', items, 'itemids', 'itemid')


def item_delete_by_ids(session: Session, itemids: List[str]) -> List[str]:
    """
    Delete items from Zabbix

    Args:
        itemids: List of item IDs to delete

    Returns:
        The deleted item ids; some versions return them as a map
    """
    return delete_by_ids(session, 'item.delete', itemids, 'itemids', 'itemid')


def itemprototype_get(session: Session, params: Optional[ItemGetParams] = None) -> List[Item]:
    """
    Get item prototypes from Zabbix with optional filtering

    Example:
        # Get item prototypes for a discovery rule
        prototypes = itemprototype_get(session, {'discoveryids': ['1001']})
    """
    return session.invoke_and_decode('itemprototype.get', with_default_output(params), List[Item])


def itemprototype_get_by_id(session: Session, itemid: str) -> Item:
    """Get the item prototype with this id; raises ExpectedOneResult otherwise"""
    return expect_one(itemprototype_get(session, {'itemids': [itemid]}))


def itemprototype_get_by_application_id(session: Session, applicationid: str) -> List[Item]:
    return itemprototype_get(session, {'applicationids': [applicationid]})


def itemprototype_create(session: Session, items: List[Item]) -> List[str]:
    """Create item prototypes; ``ruleid`` must name the parent LLD rule"""
    return create_records(session, 'itemprototype.create', items, 'itemids', 'itemid')


def itemprototype_update(session: Session, items: List[Item]) -> None:
    update_records(session, 'itemprototype.update', items)


def itemprototype_delete(session: Session, items: List[Item]) -> None:
    """Delete item prototypes, clearing their itemid on success"""
    delete_records(session, 'itemprototype.delete', items, 'prototypeids', 'itemid')


def itemprototype_delete_by_ids(session: Session, itemids: List[str]) -> List[str]:
    """Delete item prototypes by id; the server acknowledges them as prototypeids"""
    return delete_by_ids(session, 'itemprototype.delete', itemids, 'prototypeids', 'itemid')

"""
Zabbix API - Typed Python Client

This package provides typed access to the Zabbix JSON-RPC API. A Session
handles login, request ids, version detection and error decoding; the
resource modules wrap get/create/update/delete for each object type and
smooth over the differences between Zabbix versions.

Example - Basic usage:
    from zabbix_rpc import Session, host_get, host_create, Host, HostInterface
    from zabbix_rpc.types import HostGroupID

    session = Session('https://zabbix.example.com')
    session.detect_version()
    session.login('Admin', 'zabbix')

    # Get all hosts
    for host in host_get(session):
        print(host.host, host.proxy_id)

    # Create a new host
    host = Host(
        host='server-01',
        groups=[HostGroupID(groupid='1')],
        interfaces=[HostInterface(type='1', ip='192.168.1.100', port='10050')],
    )
    host_create(session, [host])
    print(host.hostid)

Example - Configuration from the environment:
    from zabbix_rpc import Session

    # Reads ZABBIX_URL, ZABBIX_USER/ZABBIX_PASSWORD or ZABBIX_TOKEN
    session = Session.from_config()

Example - Error handling:
    from zabbix_rpc import ExpectedOneResult, RemoteError, host_get_by_host

    try:
        host = host_get_by_host(session, 'server-01')
    except ExpectedOneResult as exc:
        print(f'{exc.count} hosts matched')
    except RemoteError as exc:
        print(f'Zabbix said {exc.code}: {exc.message}')
"""

# Re-export all types
from .enums import *
from .types import GetParams, HostGroupID, OutputFormat, Params, TemplateID, ZabbixModel

# Configuration
from .config import get_config, set_config, reset_config

# Errors
from .errors import (
    LEGACY_SHAPE_ERROR_CODE,
    AuthError,
    DecodeError,
    ExpectedMore,
    ExpectedOneResult,
    NotAuthenticatedError,
    RemoteError,
    TransportError,
    ZabbixError,
)

# Session
from .session import Session, parse_version

# API Information
from .apiinfo import apiinfo_version

# Host Group Management
from .hostgroup import (
    HostGroup,
    hostgroup_get,
    hostgroup_get_by_id,
    hostgroup_create,
    hostgroup_update,
    hostgroup_delete,
    hostgroup_delete_by_ids
)

# Host Management
from .host import (
    Host,
    HostInterface,
    HostInterfaceDetail,
    Inventory,
    Tag,
    host_get,
    host_get_by_hostgroup_ids,
    host_get_by_hostgroups,
    host_get_by_id,
    host_get_by_host,
    host_create,
    host_update,
    host_delete,
    host_delete_by_ids
)

# Item Management
from .item import (
    Item,
    Preprocessor,
    items_by_key,
    item_get,
    item_get_by_id,
    item_get_by_application_id,
    item_create,
    item_update,
    item_delete,
    item_delete_by_ids,
    itemprototype_get,
    itemprototype_get_by_id,
    itemprototype_get_by_application_id,
    itemprototype_create,
    itemprototype_update,
    itemprototype_delete,
    itemprototype_delete_by_ids
)

# Trigger Management
from .trigger import (
    Trigger,
    trigger_get,
    trigger_get_by_id,
    trigger_create,
    trigger_update,
    trigger_delete,
    trigger_delete_by_ids
)

# Template Management
from .template import (
    Template,
    template_get,
    template_get_by_id,
    template_create,
    template_update,
    template_delete,
    template_delete_by_ids
)

# Graph Management
from .graph import (
    Graph,
    GraphItem,
    graph_get,
    graph_get_by_id,
    graph_create,
    graph_update,
    graph_delete,
    graph_delete_by_ids,
    graphprototype_get,
    graphprototype_get_by_id,
    graphprototype_create,
    graphprototype_update,
    graphprototype_delete,
    graphprototype_delete_by_ids
)

# User Macros
from .macro import (
    Macro,
    macro_get,
    macro_get_by_id,
    macro_create,
    macro_update,
    macro_delete,
    macro_delete_by_ids
)

# Proxies
from .proxy import Proxy, proxy_get, proxy_get_by_id

# Discovery Rules
from .discovery import (
    LLDRule,
    LLDRuleFilter,
    LLDRuleFilterCondition,
    discoveryrule_get,
    discoveryrule_get_by_id,
    discoveryrule_create,
    discoveryrule_update,
    discoveryrule_delete,
    discoveryrule_delete_by_ids
)

# Applications
from .application import (
    Application,
    application_get,
    application_get_by_id,
    application_get_by_host_id_and_name,
    application_create,
    application_delete,
    application_delete_by_ids
)

__all__ = [
    # Enumerations
    'OpenIntEnum',
    'AvailableType',
    'HostStatus',
    'InventoryMode',
    'InterfaceType',
    'InternalType',
    'ItemType',
    'ValueType',
    'DataType',
    'DeltaType',
    'TriggerSeverity',
    'TriggerStatus',
    'TriggerValue',
    'GraphType',
    'GraphAxis',
    'GraphItemFunc',
    'GraphItemDraw',
    'GraphItemType',
    'GraphItemSide',

    # Types
    'GetParams',
    'HostGroupID',
    'OutputFormat',
    'Params',
    'TemplateID',
    'ZabbixModel',

    # Configuration
    'get_config',
    'set_config',
    'reset_config',

    # Errors
    'LEGACY_SHAPE_ERROR_CODE',
    'AuthError',
    'DecodeError',
    'ExpectedMore',
    'ExpectedOneResult',
    'NotAuthenticatedError',
    'RemoteError',
    'TransportError',
    'ZabbixError',

    # Session
    'Session',
    'parse_version',

    # API Information
    'apiinfo_version',

    # Host Group Management
    'HostGroup',
    'hostgroup_get',
    'hostgroup_get_by_id',
    'hostgroup_create',
    'hostgroup_update',
    'hostgroup_delete',
    'hostgroup_delete_by_ids',

    # Host Management
    'Host',
    'HostInterface',
    'HostInterfaceDetail',
    'Inventory',
    'Tag',
    'host_get',
    'host_get_by_hostgroup_ids',
    'host_get_by_hostgroups',
    'host_get_by_id',
    'host_get_by_host',
    'host_create',
    'host_update',
    'host_delete',
    'host_delete_by_ids',

    # Item Management
    'Item',
    'Preprocessor',
    'items_by_key',
    'item_get',
    'item_get_by_id',
    'item_get_by_application_id',
    'item_create',
    'item_update',
    'item_delete',
    'item_delete_by_ids',
    'itemprototype_get',
    'itemprototype_get_by_id',
    'itemprototype_get_by_application_id',
    'itemprototype_create',
    'itemprototype_update',
    'itemprototype_delete',
    'itemprototype_delete_by_ids',

    # Trigger Management
    'Trigger',
    'trigger_get',
    'trigger_get_by_id',
    'trigger_create',
    'trigger_update',
    'trigger_delete',
    'trigger_delete_by_ids',

    # Template Management
    'Template',
    'template_get',
    'template_get_by_id',
    'template_create',
    'template_update',
    'template_delete',
    'template_delete_by_ids',

    # Graph Management
    'Graph',
    'GraphItem',
    'graph_get',
    'graph_get_by_id',
    'graph_create',
    'graph_update',
    'graph_delete',
    'graph_delete_by_ids',
    'graphprototype_get',
    'graphprototype_get_by_id',
    'graphprototype_create',
    'graphprototype_update',
    'graphprototype_delete',
    'graphprototype_delete_by_ids',

    # User Macros
    'Macro',
    'macro_get',
    'macro_get_by_id',
    'macro_create',
    'macro_update',
    'macro_delete',
    'macro_delete_by_ids',

    # Proxies
    'Proxy',
    'proxy_get',
    'proxy_get_by_id',

    # Discovery Rules
    'LLDRule',
    'LLDRuleFilter',
    'LLDRuleFilterCondition',
    'discoveryrule_get',
    'discoveryrule_get_by_id',
    'discoveryrule_create',
    'discoveryrule_update',
    'discoveryrule_delete',
    'discoveryrule_delete_by_ids',

    # Applications
    'Application',
    'application_get',
    'application_get_by_id',
    'application_get_by_host_id_and_name',
    'application_create',
    'application_delete',
    'application_delete_by_ids',
]

"""Tests for the host adapter."""

import pytest

from zabbix_rpc import (
    ExpectedMore,
    ExpectedOneResult,
    HostGroup,
    HostStatus,
    InterfaceType,
    InventoryMode,
    Host,
    HostInterface,
    host_create,
    host_delete,
    host_delete_by_ids,
    host_get,
    host_get_by_host,
    host_get_by_hostgroups,
    host_get_by_id,
    host_update,
)
from zabbix_rpc.types import HostGroupID


def raw_host(**fields):
    host = {
        'hostid': '10084',
        'host': 'server-01',
        'name': 'Server 01',
        'status': '0',
        'available': '1',
        'error': '',
    }
    host.update(fields)
    return host


class TestHostGet:
    """Tests for host_get() and its lookups."""

    def test_default_output_extend(self, api, zabbix):
        zabbix.on('host.get', [])
        host_get(api)
        assert zabbix.last['params'] == {'output': 'extend'}

    def test_caller_output_kept(self, api, zabbix):
        zabbix.on('host.get', [])
        host_get(api, {'output': ['hostid', 'host'], 'limit': 1})
        assert zabbix.last['params'] == {'output': ['hostid', 'host'], 'limit': 1}

    def test_decodes_host(self, api, zabbix):
        zabbix.on('host.get', [raw_host(inventory_mode='1')])
        host = host_get(api)[0]

        assert host.hostid == '10084'
        assert host.status is HostStatus.MONITORED
        assert host.inventory_mode is InventoryMode.AUTOMATIC

    def test_missing_inventory_mode_is_disabled(self, api, zabbix):
        zabbix.on('host.get', [raw_host()])
        assert host_get(api)[0].inventory_mode is InventoryMode.DISABLED

    def test_empty_inventory_is_absent(self, api, zabbix):
        zabbix.on('host.get', [raw_host(inventory=[])])
        assert host_get(api)[0].inventory is None

    def test_populated_inventory(self, api, zabbix):
        zabbix.on('host.get', [raw_host(inventory={'location': 'Oslo', 'os': 'Linux'})])
        assert host_get(api)[0].inventory.location == 'Oslo'

    def test_interface_details(self, api, zabbix):
        interfaces = [
            {'interfaceid': '1', 'ip': '127.0.0.1', 'port': '10050', 'type': '1', 'details': []},
            {'interfaceid': '2', 'ip': '127.0.0.1', 'port': '161', 'type': 2,
             'details': {'version': '2', 'community': '{$SNMP_COMMUNITY}'}},
        ]
        zabbix.on('host.get', [raw_host(interfaces=interfaces)])
        agent, snmp = host_get(api, {'selectInterfaces': 'extend'})[0].interfaces

        assert agent.type is InterfaceType.AGENT
        assert agent.details is None
        assert snmp.type is InterfaceType.SNMP
        assert snmp.details.community == '{$SNMP_COMMUNITY}'

    def test_proxy_id_before_7_0(self, api, zabbix):
        api.version = 60403
        zabbix.on('host.get', [raw_host(proxy_hostid='5', proxyid='9')])
        assert host_get(api)[0].proxy_id == '5'

    def test_proxy_id_from_7_0(self, api, zabbix):
        api.version = 70000
        zabbix.on('host.get', [raw_host(proxy_hostid='5', proxyid='9')])
        assert host_get(api)[0].proxy_id == '9'

    def test_proxy_id_version_unknown(self, session, zabbix):
        session.set_token('token-123')
        zabbix.on('host.get', [raw_host(proxy_hostid='5')])
        assert host_get(session)[0].proxy_id == '5'

    def test_wire_proxy_fields_not_exposed(self, api, zabbix):
        api.version = 70000
        zabbix.on('host.get', [raw_host(proxy_hostid='5', proxyid='9')])
        host = host_get(api)[0]

        assert set(Host.model_fields) & {'proxyid', 'proxy_hostid'} == set()
        assert not any(name.startswith('raw_') for name in Host.model_fields)
        assert 'proxyid' not in host.model_dump()
        assert 'proxy_hostid' not in host.model_dump()

    def test_parent_templates(self, api, zabbix):
        zabbix.on('host.get', [raw_host(parentTemplates=[{'templateid': '10001'}])])
        host = host_get(api)[0]
        assert host.parent_templates[0].templateid == '10001'

    def test_get_by_id(self, api, zabbix):
        zabbix.on('host.get', [raw_host()])
        assert host_get_by_id(api, '10084').host == 'server-01'
        assert zabbix.last['params']['hostids'] == ['10084']

    def test_get_by_id_missing(self, api, zabbix):
        zabbix.on('host.get', [])
        with pytest.raises(ExpectedOneResult) as exc_info:
            host_get_by_id(api, '10084')
        assert exc_info.value.count == 0

    def test_get_by_host_ambiguous(self, api, zabbix):
        zabbix.on('host.get', [raw_host(), raw_host(hostid='10085')])
        with pytest.raises(ExpectedOneResult) as exc_info:
            host_get_by_host(api, 'server-01')
        assert exc_info.value.count == 2
        assert zabbix.last['params']['filter'] == {'host': 'server-01'}

    def test_get_by_hostgroups(self, api, zabbix):
        zabbix.on('host.get', [])
        host_get_by_hostgroups(api, [HostGroup(groupid='2', name='Linux servers')])
        assert zabbix.last['params']['groupids'] == ['2']


class TestHostWrite:
    """Tests for host create/update/delete."""

    def new_host(self, **fields):
        fields.setdefault('host', 'server-01')
        fields.setdefault('groups', [HostGroupID(groupid='2')])
        fields.setdefault('interfaces', [HostInterface(type='1', ip='10.0.0.1', port='10050')])
        return Host(**fields)

    def test_new_host_overrides(self):
        host = self.new_host(host='server-02')
        assert host.host == 'server-02'
        assert host.groups[0].groupid == '2'

    def test_create_assigns_ids(self, api, zabbix):
        zabbix.on('host.create', {'hostids': ['10100', '10101']})
        hosts = [self.new_host(), self.new_host(host='server-02')]

        assert host_create(api, hosts) == ['10100', '10101']
        assert [h.hostid for h in hosts] == ['10100', '10101']

    def test_create_payload(self, api, zabbix):
        zabbix.on('host.create', {'hostids': ['10100']})
        host_create(api, [self.new_host()])

        sent = zabbix.last['params'][0]
        assert sent['host'] == 'server-01'
        assert sent['groups'] == [{'groupid': '2'}]
        assert sent['interfaces'][0]['type'] == '1'
        assert sent['inventory_mode'] == -1
        assert 'hostid' not in sent
        assert 'available' not in sent

    def test_create_short_acknowledgement(self, api, zabbix):
        zabbix.on('host.create', {'hostids': ['10100']})
        with pytest.raises(ExpectedMore):
            host_create(api, [self.new_host(), self.new_host(host='server-02')])

    def test_proxy_written_as_proxy_hostid_before_7_0(self, api, zabbix):
        api.version = 60000
        zabbix.on('host.update', {'hostids': ['10084']})
        host_update(api, [self.new_host(hostid='10084', proxy_id='5')])

        sent = zabbix.last['params'][0]
        assert sent['proxy_hostid'] == '5'
        assert 'proxyid' not in sent
        assert 'proxy_id' not in sent

    def test_proxy_written_as_proxyid_from_7_0(self, api, zabbix):
        api.version = 70000
        zabbix.on('host.update', {'hostids': ['10084']})
        host_update(api, [self.new_host(hostid='10084', proxy_id='5')])

        sent = zabbix.last['params'][0]
        assert sent['proxyid'] == '5'
        assert sent['monitored_by'] == 1
        assert 'proxy_hostid' not in sent

    def test_delete_by_ids(self, api, zabbix):
        zabbix.on('host.delete', {'hostids': ['1', '2']})
        assert host_delete_by_ids(api, ['1', '2']) == ['1', '2']

    def test_delete_by_ids_short(self, api, zabbix):
        zabbix.on('host.delete', {'hostids': ['1']})
        with pytest.raises(ExpectedMore) as exc_info:
            host_delete_by_ids(api, ['1', '2'])
        assert (exc_info.value.expected, exc_info.value.actual) == (2, 1)

    def test_delete_clears_ids(self, api, zabbix):
        zabbix.on('host.delete', {'hostids': ['10084']})
        host = self.new_host(hostid='10084')
        host_delete(api, [host])

        assert zabbix.last['params'] == ['10084']
        assert host.hostid is None

    def test_delete_without_id(self, api, zabbix):
        saved = self.new_host(hostid='10084')
        unsaved = self.new_host(host='server-02')

        with pytest.raises(ValueError):
            host_delete(api, [saved, unsaved])

        assert zabbix.requests == []
        assert saved.hostid == '10084'

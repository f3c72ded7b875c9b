"""Tests for the helpers shared by resource modules."""

import pytest

from fakes import Error
from zabbix_rpc import DecodeError, ExpectedMore, ExpectedOneResult, RemoteError
from zabbix_rpc.types import id_list
from zabbix_rpc.utils import delete_by_ids, expect_one, returned_ids, with_default_output


class TestWithDefaultOutput:
    """Tests for with_default_output()."""

    def test_adds_extend(self):
        assert with_default_output({'hostids': ['1']}) == {'hostids': ['1'], 'output': 'extend'}

    def test_none(self):
        assert with_default_output(None) == {'output': 'extend'}

    def test_caller_output_wins(self):
        assert with_default_output({'output': ['hostid']}) == {'output': ['hostid']}

    def test_does_not_mutate(self):
        params = {'hostids': ['1']}
        with_default_output(params)
        assert params == {'hostids': ['1']}


class TestExpectOne:
    """Tests for expect_one()."""

    def test_one(self):
        assert expect_one(['a']) == 'a'

    @pytest.mark.parametrize('records', [[], ['a', 'b']])
    def test_other_counts(self, records):
        with pytest.raises(ExpectedOneResult) as exc_info:
            expect_one(records)
        assert exc_info.value.count == len(records)


class TestIdList:
    """Tests for decoding id collections."""

    def test_array(self):
        assert id_list(['1', 2], 'hostids') == ['1', '2']

    def test_map(self):
        assert id_list({'0': '13', '1': '14'}, 'triggerids') == ['13', '14']

    def test_scalar(self):
        with pytest.raises(DecodeError):
            id_list('13', 'triggerids')

    def test_returned_ids_missing_key(self):
        with pytest.raises(DecodeError):
            returned_ids({'itemids': ['1']}, 'hostids', 'host.delete')

    def test_returned_ids_not_a_map(self):
        with pytest.raises(DecodeError):
            returned_ids(['1'], 'hostids', 'host.delete')


class TestDeleteByIds:
    """Tests for delete_by_ids()."""

    def test_all_acknowledged(self, api, zabbix):
        zabbix.on('host.delete', {'hostids': ['1', '2']})
        assert delete_by_ids(api, 'host.delete', ['1', '2'], 'hostids', 'hostid') == ['1', '2']
        assert zabbix.last['params'] == ['1', '2']

    def test_fewer_acknowledged(self, api, zabbix):
        zabbix.on('host.delete', {'hostids': ['1']})
        with pytest.raises(ExpectedMore) as exc_info:
            delete_by_ids(api, 'host.delete', ['1', '2'], 'hostids', 'hostid')
        assert (exc_info.value.expected, exc_info.value.actual) == (2, 1)

    def test_map_shaped_acknowledgement(self, api, zabbix):
        zabbix.on('trigger.delete', {'triggerids': {'0': '13', '1': '14'}})
        assert delete_by_ids(api, 'trigger.delete', ['13', '14'], 'triggerids', 'triggerid') == ['13', '14']

    def test_legacy_shape_retried_once(self, api, zabbix):
        zabbix.on(
            'host.delete',
            Error(-32500, 'Application error.', 'No permissions to referred object or it does not exist!'),
            {'hostids': ['1', '2']},
        )
        assert delete_by_ids(api, 'host.delete', ['1', '2'], 'hostids', 'hostid') == ['1', '2']

        calls = zabbix.calls('host.delete')
        assert len(calls) == 2
        assert calls[0]['params'] == ['1', '2']
        assert calls[1]['params'] == [{'hostid': '1'}, {'hostid': '2'}]

    def test_legacy_retry_failure_is_final(self, api, zabbix):
        zabbix.on('host.delete', Error(-32500, 'Application error.'))
        with pytest.raises(RemoteError) as exc_info:
            delete_by_ids(api, 'host.delete', ['1'], 'hostids', 'hostid')

        assert exc_info.value.code == -32500
        assert len(zabbix.calls('host.delete')) == 2

    def test_legacy_retry_cardinality_checked(self, api, zabbix):
        zabbix.on('host.delete', Error(-32500, 'Application error.'), {'hostids': ['1']})
        with pytest.raises(ExpectedMore):
            delete_by_ids(api, 'host.delete', ['1', '2'], 'hostids', 'hostid')

    @pytest.mark.parametrize('ids', [['1', None], ['']])
    def test_missing_ids_rejected(self, api, zabbix, ids):
        with pytest.raises(ValueError):
            delete_by_ids(api, 'host.delete', ids, 'hostids', 'hostid')
        assert zabbix.requests == []

    def test_other_errors_not_retried(self, api, zabbix):
        zabbix.on('host.delete', Error(-32602, 'Invalid params.'))
        with pytest.raises(RemoteError):
            delete_by_ids(api, 'host.delete', ['1'], 'hostids', 'hostid')
        assert len(zabbix.calls('host.delete')) == 1

"""
Helpers shared by the resource modules

These implement the conventions every resource follows on top of
Session.invoke(): the default "output", get-by-id cardinality, assigning
created ids back onto records, and bulk deletes.
"""

from typing import Any, Dict, List, Optional, Sequence, TypeVar

from .config import debug_log
from .errors import (
    LEGACY_SHAPE_ERROR_CODE,
    DecodeError,
    ExpectedMore,
    ExpectedOneResult,
    RemoteError,
)
from .session import Session
from .types import ZabbixModel, id_list


T = TypeVar('T')
M = TypeVar('M', bound=ZabbixModel)


def with_default_output(params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Copy get parameters, adding "output": "extend" unless the caller chose one"""
    params = dict(params or {})
    params.setdefault('output', 'extend')
    return params


def expect_one(records: Sequence[T]) -> T:
    """
    Return the only record of a lookup

    Raises:
        ExpectedOneResult: If there are zero or several records
    """
    if len(records) != 1:
        raise ExpectedOneResult(len(records))
    return records[0]


def returned_ids(result: Any, key: str, method: str) -> List[str]:
    """
    Read the identifiers a create/update/delete call acknowledged

    Args:
        result: Raw result, e.g. {"hostids": ["10084"]}
        key: Key holding the ids, e.g. "hostids"
        method: Method name for error messages

    Raises:
        DecodeError: If the result has no such key or it holds no ids
    """
    if not isinstance(result, dict) or key not in result:
        raise DecodeError(f'Expected {method} to return a map with {key!r}, got {result!r}')
    return id_list(result[key], key)


def create_records(session: Session, method: str, records: List[M], key: str, attr: str) -> List[str]:
    """
    Create records and store the new ids on them

    Args:
        session: Authenticated session
        method: Create method, e.g. "host.create"
        records: Records to create; updated in place
        key: Result key holding the new ids
        attr: Record attribute receiving each id

    Returns:
        The new ids, in the order of ``records``
    """
    result = session.invoke(method, [record.to_api(session.version) for record in records])
    ids = returned_ids(result, key, method)
    if len(ids) != len(records):
        raise ExpectedMore(len(records), len(ids))
    for record, new_id in zip(records, ids):
        setattr(record, attr, new_id)
    return ids


def update_records(session: Session, method: str, records: List[M]) -> None:
    """Send records to an update method"""
    session.invoke(method, [record.to_api(session.version) for record in records])


def delete_by_ids(session: Session, method: str, ids: Sequence[str], key: str, id_field: str) -> List[str]:
    """
    Delete objects by id and check every one was acknowledged

    The ids are sent as a plain array. Servers that only understand the
    legacy shape answer -32500; the call is then repeated once with
    ``[{id_field: id}, ...]`` and that attempt's outcome is final.

    Args:
        session: Authenticated session
        method: Delete method, e.g. "host.delete"
        ids: Identifiers to delete
        key: Result key acknowledging the ids, e.g. "hostids"
        id_field: Object key of the legacy shape, e.g. "hostid"

    Returns:
        The acknowledged ids

    Raises:
        ValueError: If an id is missing or empty; nothing is sent
        ExpectedMore: If fewer ids were acknowledged than requested
    """
    if any(i is None or str(i) == '' for i in ids):
        raise ValueError(f'{method} called with a missing id: {list(ids)!r}')
    ids = [str(i) for i in ids]
    try:
        result = session.invoke(method, ids)
    except RemoteError as exc:
        if exc.code != LEGACY_SHAPE_ERROR_CODE:
            raise
        debug_log(f'{method} rejected id list, retrying with {id_field} objects', enabled=session.debug)
        result = session.invoke(method, [{id_field: i} for i in ids])

    deleted = returned_ids(result, key, method)
    if len(deleted) != len(ids):
        raise ExpectedMore(len(ids), len(deleted))
    return deleted


def delete_records(session: Session, method: str, records: List[M], key: str, attr: str) -> None:
    """
    Delete records by their id attribute and clear it on success

    Raises:
        ValueError: If a record has no id; nothing is sent
    """
    for record in records:
        if not getattr(record, attr):
            raise ValueError(f'Cannot delete {type(record).__name__} without {attr}: {record!r}')
    delete_by_ids(session, method, [getattr(record, attr) for record in records], key, attr)
    for record in records:
        setattr(record, attr, None)

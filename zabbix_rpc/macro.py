"""
User Macro Management Tools for Zabbix

Example:
    from zabbix_rpc.macro import Macro, macro_get, macro_create

    # Get macros for specific host
    host_macros = macro_get(session, {'hostids': ['10001']})

    macro_create(session, [Macro(hostid='10001', macro='{$PORT}', value='8080')])
"""

from typing import List, Optional

from .session import Session
from .types import GetParams, ZabbixModel
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


class Macro(ZabbixModel):
    """Host macro object"""
    hostmacroid: Optional[str] = None
    hostid: Optional[str] = None
    macro: str
    value: Optional[str] = None
    description: Optional[str] = None


class UsermacroGetParams(GetParams, total=False):
    """Parameters for usermacro.get API method"""
    hostmacroids: List[str]
    hostids: List[str]
    templateids: List[str]


def macro_get(session: Session, params: Optional[UsermacroGetParams] = None) -> List[Macro]:
    """
    Get host macros from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of host macros
    """
    return session.invoke_and_decode('usermacro.get', with_default_output(params), List[Macro])


def macro_get_by_id(session: Session, hostmacroid: str) -> Macro:
    """Get the macro with this id; raises ExpectedOneResult otherwise"""
    return expect_one(macro_get(session, {'hostmacroids': [hostmacroid]}))


def macro_create(session: Session, macros: List[Macro]) -> List[str]:
    """Create host macros; returns the new ids, also stored on each macro"""
    return create_records(session, 'usermacro.create', macros, 'hostmacroids', 'hostmacroid')


def macro_update(session: Session, macros: List[Macro]) -> None:
    """Update existing host macros"""
    update_records(session, 'usermacro.update', macros)


def macro_delete(session: Session, macros: List[Macro]) -> None:
    """Delete host macros, clearing their hostmacroid on success"""
    delete_records(session, 'usermacro.delete', macros, 'hostmacroids', 'hostmacroid')


def macro_delete_by_ids(session: Session, hostmacroids: List[str]) -> List[str]:
    """Delete host macros by id; returns the deleted ids"""
    return delete_by_ids(session, 'usermacro.delete', hostmacroids, 'hostmacroids', 'hostmacroid')

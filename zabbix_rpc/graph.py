"""
Graph Management Tools for Zabbix

Covers graphs and graph prototypes.

Example:
    from zabbix_rpc.graph import Graph, GraphItem, graph_get, graph_create

    # Get all graphs for a host
    graphs = graph_get(session, {'hostids': ['10001']})

    graph = Graph(name='CPU', width='900', height='200',
                  gitems=[GraphItem(itemid='23296', color='00AA00')])
    graph_create(session, [graph])
"""

from typing import Annotated, Any, List, Optional

from .enums import GraphAxis, GraphItemDraw, GraphItemFunc, GraphItemSide, GraphItemType, GraphType
from .session import Session
from .types import GetParams, StrFromNumber, ZabbixModel
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


class GraphItem(ZabbixModel):
    """Item drawn on a graph"""
    gitemid: Optional[str] = None
    graphid: Optional[str] = None
    color: str
    itemid: str
    calc_fnc: Annotated[Optional[GraphItemFunc], StrFromNumber] = None
    drawtype: Annotated[Optional[GraphItemDraw], StrFromNumber] = None
    sortorder: Optional[str] = None
    type: Annotated[Optional[GraphItemType], StrFromNumber] = None
    yaxisside: Annotated[Optional[GraphItemSide], StrFromNumber] = None


class Graph(ZabbixModel):
    """Graph object"""
    graphid: Optional[str] = None
    name: str
    height: str
    width: str
    graphtype: Annotated[Optional[GraphType], StrFromNumber] = None
    percent_left: Optional[str] = None
    percent_right: Optional[str] = None
    show_3d: Optional[str] = None
    show_legend: Optional[str] = None
    show_work_period: Optional[str] = None
    yaxismax: Optional[str] = None
    ymax_itemid: Optional[str] = None
    ymax_type: Annotated[Optional[GraphAxis], StrFromNumber] = None
    yaxismin: Optional[str] = None
    ymin_itemid: Optional[str] = None
    ymin_type: Annotated[Optional[GraphAxis], StrFromNumber] = None
    gitems: Optional[List[GraphItem]] = None


class GraphGetParams(GetParams, total=False):
    """Parameters for graph.get and graphprototype.get API methods"""
    graphids: List[str]
    hostids: List[str]
    templateids: List[str]
    discoveryids: List[str]
    selectGraphItems: Any


def graph_get(session: Session, params: Optional[GraphGetParams] = None) -> List[Graph]:
    """
    Get graphs from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of graphs
    """
    return session.invoke_and_decode('graph.get', with_default_output(params), List[Graph])


def graph_get_by_id(session: Session, graphid: str) -> Graph:
    """Get the graph with this id; raises ExpectedOneResult otherwise"""
    return expect_one(graph_get(session, {'graphids': [graphid]}))


def graph_create(session: Session, graphs: List[Graph]) -> List[str]:
    """Create graphs; returns the new ids, also stored on each graph"""
    return create_records(session, 'graph.create', graphs, 'graphids', 'graphid')


def graph_update(session: Session, graphs: List[Graph]) -> None:
    update_records(session, 'graph.update', graphs)


def graph_delete(session: Session, graphs: List[Graph]) -> None:
    """Delete graphs, clearing their graphid on success"""
    delete_records(session, 'graph.delete', graphs, 'graphids', 'graphid')


def graph_delete_by_ids(session: Session, graphids: List[str]) -> List[str]:
    """Delete graphs by id; returns the deleted ids"""
    return delete_by_ids(session, 'graph.delete', graphids, 'graphids', 'graphid')


def graphprototype_get(session: Session, params: Optional[GraphGetParams] = None) -> List[Graph]:
    """Get graph prototypes from Zabbix with optional filtering"""
    return session.invoke_and_decode('graphprototype.get', with_default_output(params), List[Graph])


def graphprototype_get_by_id(session: Session, graphid: str) -> Graph:
    return expect_one(graphprototype_get(session, {'graphids': [graphid]}))


def graphprototype_create(session: Session, graphs: List[Graph]) -> List[str]:
    return create_records(session, 'graphprototype.create', graphs, 'graphids', 'graphid')


def graphprototype_update(session: Session, graphs: List[Graph]) -> None:
    update_records(session, 'graphprototype.update', graphs)


def graphprototype_delete(session: Session, graphs: List[Graph]) -> None:
    delete_records(session, 'graphprototype.delete', graphs, 'graphids', 'graphid')


def graphprototype_delete_by_ids(session: Session, graphids: List[str]) -> List[str]:
    return delete_by_ids(session, 'graphprototype.delete', graphids, 'graphids', 'graphid')

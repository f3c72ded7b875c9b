"""
Application Tools for Zabbix

Applications were removed in Zabbix 5.4; these calls only work against
older servers.

Example:
    from zabbix_rpc.application import Application, application_create

    app = Application(hostid='10001', name='Web')
    application_create(session, [app])
"""

from typing import Annotated, List, Optional

from pydantic import BeforeValidator, Field

from .session import Session
from .types import GetParams, ZabbixModel, ids_from_objects
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    with_default_output,
)


class Application(ZabbixModel):
    """Application object"""
    applicationid: Optional[str] = None
    hostid: str
    name: str
    # readonly; ids of the parent template applications
    templateids: Annotated[List[str], BeforeValidator(ids_from_objects('applicationid'))] = Field(
        default_factory=list, exclude=True
    )


class ApplicationGetParams(GetParams, total=False):
    """Parameters for application.get API method"""
    applicationids: List[str]
    hostids: List[str]
    templateids: List[str]


def application_get(session: Session, params: Optional[ApplicationGetParams] = None) -> List[Application]:
    """
    Get applications from Zabbix with optional filtering

    Returns:
        List of applications
    """
    return session.invoke_and_decode('application.get', with_default_output(params), List[Application])


def application_get_by_id(session: Session, applicationid: str) -> Application:
    """Get the application with this id; raises ExpectedOneResult otherwise"""
    return expect_one(application_get(session, {'applicationids': [applicationid]}))


def application_get_by_host_id_and_name(session: Session, hostid: str, name: str) -> Application:
    """Get a host's application by name; raises ExpectedOneResult otherwise"""
    return expect_one(application_get(session, {'hostids': [hostid], 'filter': {'name': name}}))


def application_create(session: Session, applications: List[Application]) -> List[str]:
    """Create applications; returns the new ids, also stored on each application"""
    return create_records(session, 'application.create', applications, 'applicationids', 'applicationid')


def application_delete(session: Session, applications: List[Application]) -> None:
    """Delete applications, clearing their applicationid on success"""
    delete_records(session, 'application.delete', applications, 'applicationids', 'applicationid')


def application_delete_by_ids(session: Session, applicationids: List[str]) -> List[str]:
    return delete_by_ids(session, 'application.delete', applicationids, 'applicationids', 'applicationid')

"""
Template Management Tools for Zabbix

Example:
    from zabbix_rpc.template import Template, template_get, template_create
    from zabbix_rpc.types import HostGroupID

    # Get all templates
    templates = template_get(session)

    # Create a new template
    template = Template(
        host='Template OS Linux',
        name='Linux Servers Template',
        groups=[HostGroupID(groupid='1')],
    )
    template_create(session, [template])
"""

from typing import Annotated, Any, List, Optional

from pydantic import BeforeValidator, Field

from .macro import Macro
from .session import Session
from .types import GetParams, HostGroupID, TemplateID, ZabbixModel, ids_from_objects
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


class Template(ZabbixModel):
    """Template object"""
    templateid: Optional[str] = None
    host: str
    description: Optional[str] = None
    name: Optional[str] = None
    groups: Optional[List[HostGroupID]] = None
    macros: Optional[List[Macro]] = None
    templates: Optional[List[TemplateID]] = None
    templates_clear: Optional[List[TemplateID]] = None

    # Read only
    parent_templates: Optional[List[TemplateID]] = Field(
        default=None, alias='parentTemplates', exclude=True
    )
    hosts: Annotated[List[str], BeforeValidator(ids_from_objects('hostid'))] = Field(
        default_factory=list, exclude=True
    )


class TemplateGetParams(GetParams, total=False):
    """Parameters for template.get API method"""
    templateids: List[str]
    groupids: List[str]
    hostids: List[str]
    selectGroups: Any
    selectHosts: Any
    selectMacros: Any
    selectParentTemplates: Any


def template_get(session: Session, params: Optional[TemplateGetParams] = None) -> List[Template]:
    """
    Get templates from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of templates
    """
    return session.invoke_and_decode('template.get', with_default_output(params), List[Template])


def template_get_by_id(session: Session, templateid: str) -> Template:
    """Get the template with this id; raises ExpectedOneResult otherwise"""
    return expect_one(template_get(session, {'templateids': [templateid]}))


def template_create(session: Session, templates: List[Template]) -> List[str]:
    """Create templates; returns the new ids, also stored on each template"""
    return create_records(session, 'template.create', templates, 'templateids', 'templateid')


def template_update(session: Session, templates: List[Template]) -> None:
    """Update existing templates"""
    update_records(session, 'template.update', templates)


def template_delete(session: Session, templates: List[Template]) -> None:
    """Delete templates, clearing their templateid on success"""
    delete_records(session, 'template.delete', templates, 'templateids', 'templateid')


def template_delete_by_ids(session: Session, templateids: List[str]) -> List[str]:
    """
    Delete templates from Zabbix

    Args:
        templateids: List of template IDs to delete

    Returns:
        The deleted template ids
    """
    return delete_by_ids(session, 'template.delete', templateids, 'templateids', 'templateid')

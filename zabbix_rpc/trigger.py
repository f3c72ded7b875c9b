"""
Trigger Management Tools for Zabbix

Example:
    from zabbix_rpc.enums import TriggerSeverity
    from zabbix_rpc.trigger import Trigger, trigger_get, trigger_create

    # Get all triggers for a host
    triggers = trigger_get(session, {'hostids': ['10001']})

    # Create a new trigger
    trigger = Trigger(
        description='High CPU Load',
        expression='last(/server-01/system.cpu.load)>5',
        priority=TriggerSeverity.AVERAGE,
    )
    trigger_create(session, [trigger])
"""

from typing import Annotated, List, Optional

from pydantic import Field

from .enums import TriggerSeverity, TriggerStatus, TriggerValue
from .session import Session
from .types import GetParams, IntFromStr, ZabbixModel
from .utils import (
    create_records,
    delete_by_ids,
    delete_records,
    expect_one,
    update_records,
    with_default_output,
)


class Trigger(ZabbixModel):
    """Trigger object"""
    triggerid: Optional[str] = None
    description: str
    expression: str
    comments: str = ''
    priority: Annotated[TriggerSeverity, IntFromStr] = TriggerSeverity.NOT_CLASSIFIED
    status: Annotated[TriggerStatus, IntFromStr] = TriggerStatus.ENABLED
    # readonly
    value: Annotated[Optional[TriggerValue], IntFromStr] = Field(default=None, exclude=True)


class TriggerGetParams(GetParams, total=False):
    """Parameters for trigger.get API method"""
    triggerids: List[str]
    hostids: List[str]
    groupids: List[str]
    templateids: List[str]
    expandExpression: bool


def trigger_get(session: Session, params: Optional[TriggerGetParams] = None) -> List[Trigger]:
    """
    Get triggers from Zabbix with optional filtering

    Args:
        session: Authenticated session
        params: Optional filtering parameters

    Returns:
        List of triggers
    """
    return session.invoke_and_decode('trigger.get', with_default_output(params), List[Trigger])


def trigger_get_by_id(session: Session, triggerid: str) -> Trigger:
    """Get the trigger with this id; raises ExpectedOneResult otherwise"""
    return expect_one(trigger_get(session, {'triggerids': [triggerid]}))


def trigger_create(session: Session, triggers: List[Trigger]) -> List[str]:
    """Create triggers; returns the new ids, also stored on each trigger"""
    return create_records(session, 'trigger.create', triggers, 'triggerids', 'triggerid')


def trigger_update(session: Session, triggers: List[Trigger]) -> None:
    """Update existing triggers"""
    update_records(session, 'trigger.update', triggers)


def trigger_delete(session: Session, triggers: List[Trigger]) -> None:
    """Delete triggers, clearing their triggerid on success"""
    delete_records(session, 'trigger.delete', triggers, 'triggerids', 'triggerid')


def trigger_delete_by_ids(session: Session, triggerids: List[str]) -> List[str]:
    """
    Delete triggers from Zabbix

    Args:
        triggerids: List of trigger IDs to delete

    Returns:
        The deleted trigger ids; some versions return them as a map
    """
    return delete_by_ids(session, 'trigger.delete', triggerids, 'triggerids', 'triggerid')

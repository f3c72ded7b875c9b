"""
API Information Tools for Zabbix

Example:
    from zabbix_rpc.apiinfo import apiinfo_version

    # Get Zabbix API version, no login needed
    version = apiinfo_version(session)
"""

from .errors import DecodeError
from .session import Session


def apiinfo_version(session: Session) -> str:
    """
    Get Zabbix API version information

    Returns:
        Version string, e.g. "7.0.0"
    """
    version = session.invoke('apiinfo.version', {})
    if not isinstance(version, str):
        raise DecodeError(f'apiinfo.version returned {type(version).__name__}, expected a string')
    return version

"""
Enumerations used by Zabbix API objects

Each resource gets its own types, even where the integer values coincide
(host status and trigger status are both 0/1 but are not interchangeable).
"""

from enum import Enum, IntEnum


class OpenIntEnum(IntEnum):
    """IntEnum that accepts values added by newer Zabbix releases.

    An unknown value becomes a pseudo-member named ``UNKNOWN_<value>``
    instead of failing the whole decode.
    """

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        member = int.__new__(cls, value)
        member._name_ = f'UNKNOWN_{value}'
        member._value_ = value
        return member


# Hosts
# https://www.zabbix.com/documentation/current/en/manual/api/reference/host/object

class AvailableType(IntEnum):
    """(readonly) Availability of Zabbix agent"""
    UNKNOWN = 0
    AVAILABLE = 1
    UNAVAILABLE = 2


class HostStatus(IntEnum):
    """Status and function of the host"""
    MONITORED = 0
    UNMONITORED = 1


class InventoryMode(IntEnum):
    """Host inventory population mode"""
    DISABLED = -1
    MANUAL = 0
    AUTOMATIC = 1


class InterfaceType(str, Enum):
    """Host interface type"""
    AGENT = '1'
    SNMP = '2'
    IPMI = '3'
    JMX = '4'


# Host groups

class InternalType(IntEnum):
    """Whether the group is used internally and cannot be deleted"""
    NOT_INTERNAL = 0
    INTERNAL = 1


# Items
# https://www.zabbix.com/documentation/current/en/manual/config/items/itemtypes

class ItemType(OpenIntEnum):
    ZABBIX_AGENT = 0
    SNMPV1_AGENT = 1
    ZABBIX_TRAPPER = 2
    SIMPLE_CHECK = 3
    SNMPV2_AGENT = 4
    ZABBIX_INTERNAL = 5
    SNMPV3_AGENT = 6
    ZABBIX_AGENT_ACTIVE = 7
    ZABBIX_AGGREGATE = 8
    WEB_ITEM = 9
    EXTERNAL_CHECK = 10
    DATABASE_MONITOR = 11
    IPMI_AGENT = 12
    SSH_AGENT = 13
    TELNET_AGENT = 14
    CALCULATED = 15
    JMX_AGENT = 16
    SNMP_TRAP = 17
    DEPENDENT = 18
    HTTP_AGENT = 19
    SNMP_AGENT = 20
    SCRIPT = 21
    BROWSER = 22


class ValueType(OpenIntEnum):
    """Type of information of the item"""
    FLOAT = 0
    CHARACTER = 1
    LOG = 2
    UNSIGNED = 3
    TEXT = 4
    BINARY = 5


class DataType(IntEnum):
    """Data type of the item (removed in 3.4)"""
    DECIMAL = 0
    OCTAL = 1
    HEXADECIMAL = 2
    BOOLEAN = 3


class DeltaType(IntEnum):
    """Value that will be stored (removed in 3.4)"""
    AS_IS = 0
    SPEED = 1
    DELTA = 2


# Triggers
# https://www.zabbix.com/documentation/current/en/manual/config/triggers/severity

class TriggerSeverity(IntEnum):
    NOT_CLASSIFIED = 0
    INFORMATION = 1
    WARNING = 2
    AVERAGE = 3
    HIGH = 4
    DISASTER = 5


class TriggerStatus(IntEnum):
    ENABLED = 0
    DISABLED = 1


class TriggerValue(IntEnum):
    OK = 0
    PROBLEM = 1


# Graphs

class GraphType(str, Enum):
    NORMAL = '0'
    STACKED = '1'
    PIE = '2'
    EXPLODED = '3'


class GraphAxis(str, Enum):
    CALCULATED = '0'
    FIXED = '1'
    ITEM = '2'


class GraphItemFunc(str, Enum):
    MIN = '1'
    AVG = '2'
    MAX = '4'
    ALL = '7'
    LAST = '9'


class GraphItemDraw(str, Enum):
    LINE = '0'
    FILLED = '1'
    BOLD = '2'
    DOT = '3'
    DASHED = '4'
    GRADIENT = '5'


class GraphItemType(str, Enum):
    SIMPLE = '0'
    SUM = '2'


class GraphItemSide(str, Enum):
    LEFT = '0'
    RIGHT = '1'

"""
Type definitions for the Zabbix API client

Records returned by the API are pydantic models. The server's wire format
is not consistent across versions and endpoints, so this module also holds
the small validators used to normalise it before a model commits to a type.
"""

from typing import Any, Callable, Dict, List, TypedDict, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationInfo

from .errors import DecodeError


# Output format can be "extend" or a list of field names
OutputFormat = Union[str, List[str]]

# Search and filter criteria
SearchCriteria = Dict[str, str]
FilterCriteria = Dict[str, Any]

# Parameters of a remote method: a keyed mapping, or a list for bulk calls
Params = Union[Dict[str, Any], List[Any]]


class GetParams(TypedDict, total=False):
    """Common parameters for *.get API methods"""
    output: OutputFormat
    search: SearchCriteria
    filter: FilterCriteria
    limit: int
    sortfield: Union[str, List[str]]
    sortorder: str


class ZabbixModel(BaseModel):
    """Base model for Zabbix API objects"""

    model_config = ConfigDict(
        extra='ignore',
        populate_by_name=True,
        # Some server versions send numbers where the docs promise strings
        coerce_numbers_to_str=True,
    )

    def model_dump_api(self) -> Dict[str, Any]:
        """Dump as a JSON-serializable dict for API calls, dropping None values"""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)

    def to_api(self, version: int = 0) -> Dict[str, Any]:
        """Wire form for create/update calls against a server of ``version``"""
        return self.model_dump_api()


class HostGroupID(ZabbixModel):
    """Host group reference"""
    groupid: str


class TemplateID(ZabbixModel):
    """Template reference"""
    templateid: str


def absent_if_empty(value: Any) -> Any:
    """Map an empty array or object to None.

    PHP serializes an empty associative array as ``[]``, so nested objects
    show up as an empty list when the server has no data for them.
    """
    if isinstance(value, (list, dict)) and not value:
        return None
    return value


def empty_map_if_empty(value: Any) -> Any:
    """Map an empty array to an empty dict, for fields typed as maps"""
    if isinstance(value, list) and not value:
        return {}
    return value


def int_from_str(value: Any) -> Any:
    """Parse numeric strings, which is how the API sends most enumerations"""
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value)
    return value


def str_from_number(value: Any) -> Any:
    """Render JSON numbers as strings for string-valued enumerations"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def ids_from_objects(key: str) -> Callable[[Any], Any]:
    """Build a validator turning ``[{key: id}, ...]`` into ``[id, ...]``.

    Several list fields are written as plain ids but read back as objects.
    """
    def _validate(value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [v.get(key) if isinstance(v, dict) else v for v in value]
        return value
    return _validate


EmptyAsNone = BeforeValidator(absent_if_empty)
EmptyAsMap = BeforeValidator(empty_map_if_empty)
IntFromStr = BeforeValidator(int_from_str)
StrFromNumber = BeforeValidator(str_from_number)


def id_list(value: Any, key: str) -> List[str]:
    """
    Decode a collection of identifiers that may be an array or a map

    Args:
        value: Raw value from a create/delete result
        key: Result key the value was read from (for error messages)

    Returns:
        Identifiers as strings, in server order

    Raises:
        DecodeError: If the value is neither an array nor a map
    """
    if isinstance(value, list):
        return [str(v) for v in value]
    if isinstance(value, dict):
        return [str(v) for v in value.values()]
    raise DecodeError(f'Expected {key!r} to be an array or a map, got {type(value).__name__}')


def context_version(info: ValidationInfo) -> int:
    """Server version carried in the validation context (0 when unknown)"""
    context = info.context or {}
    return int(context.get('version') or 0)


def version_field(version: int, legacy: str, current: str, since: int) -> str:
    """Pick the wire name of a field that was renamed in release ``since``"""
    return current if version >= since else legacy

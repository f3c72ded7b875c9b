"""
Exceptions raised by the Zabbix API client.

Transport, decode and remote failures are kept apart so callers can choose
their own retry policy. Cardinality errors are raised by the resource
adapters, never by the session.
"""

from typing import Any, Optional


# Remote code returned when a request shape is not understood by the server
# version (e.g. a plain id list sent to a server expecting id objects).
LEGACY_SHAPE_ERROR_CODE = -32500


class ZabbixError(Exception):
    """Base class for every error raised by this package"""


class TransportError(ZabbixError):
    """The HTTP round trip failed or returned a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DecodeError(ZabbixError):
    """A response could not be decoded into the expected envelope or type"""


class RemoteError(ZabbixError):
    """The Zabbix API rejected the call with an error object"""

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"Zabbix API error {code}: {message} ({data or 'no data'})")


class AuthError(RemoteError):
    """user.login was rejected"""


class NotAuthenticatedError(ZabbixError):
    """An authenticated method was called before login"""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"{method} requires an authenticated session; call login() first")


class ExpectedOneResult(ZabbixError):
    """A lookup expected exactly one record"""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Expected exactly one result, got {count}")


class ExpectedMore(ZabbixError):
    """The server acknowledged fewer objects than were sent"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} results, got {actual}")

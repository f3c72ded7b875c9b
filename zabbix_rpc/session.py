"""
Zabbix API session

A Session owns the HTTP client, the auth token, the request id counter and
the detected server version. Resource modules only ever talk to the API
through Session.invoke() and Session.invoke_and_decode().

Example:
    from zabbix_rpc import Session

    with Session('https://zabbix.example.com') as session:
        session.detect_version()
        session.login('Admin', 'zabbix')
        hosts = session.invoke('host.get', {'output': ['hostid', 'host']})
"""

import re
import threading
from functools import lru_cache
from typing import Any, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .config import ZabbixConfig, current_config, debug_log, get_zabbix_api_url
from .errors import (
    AuthError,
    DecodeError,
    NotAuthenticatedError,
    RemoteError,
    TransportError,
)
from .types import Params, version_field


T = TypeVar('T')

# Methods the server accepts without a session token
UNAUTHENTICATED_METHODS = frozenset({'apiinfo.version', 'user.login'})

# user.login takes "username" instead of "user" from 5.4
LOGIN_USERNAME_SINCE = 50400

# The "auth" request property was removed in 7.2; the token goes in a header
BEARER_AUTH_SINCE = 70200

_VERSION_RE = re.compile(r'^\s*(\d+)\.(\d+)(?:\.(\d+))?')


class ResponseError(BaseModel):
    """Error object of a JSON-RPC response"""
    code: int
    message: str
    data: Any = None


class Response(BaseModel):
    """JSON-RPC response envelope"""

    model_config = ConfigDict(extra='ignore')

    jsonrpc: str
    id: Optional[int] = None
    result: Any = None
    error: Optional[ResponseError] = None


def parse_version(text: str) -> int:
    """
    Parse a dotted Zabbix version into a comparable integer

    Args:
        text: Version string, e.g. "6.4.3" or "7.0.0rc1"

    Returns:
        major * 10000 + minor * 100 + patch, e.g. 60403

    Raises:
        DecodeError: If the string does not start with major.minor
    """
    match = _VERSION_RE.match(text)
    if match is None:
        raise DecodeError(f'Invalid Zabbix version string: {text!r}')
    major, minor, patch = match.groups()
    return int(major) * 10000 + int(minor) * 100 + int(patch or 0)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class Session:
    """Authenticated handle to the Zabbix JSON-RPC API"""

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = 30,
        verify_ssl: bool = True,
        debug: bool = False,
        login_field: Optional[str] = None,
        http: Optional[requests.Session] = None,
    ):
        """
        Create a session. No request is made until a method is called.

        Args:
            url: Zabbix frontend URL, with or without /api_jsonrpc.php
            timeout: Per-call timeout in seconds (None waits forever)
            verify_ssl: Verify TLS certificates
            debug: Print calls and failures
            login_field: Force "user" or "username" for user.login;
                chosen from the detected version when omitted
            http: HTTP client to use instead of a fresh requests.Session
        """
        if login_field not in (None, 'user', 'username'):
            raise ValueError(f"login_field must be 'user' or 'username', got {login_field!r}")

        self.url = get_zabbix_api_url(url)
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.debug = debug
        self.login_field = login_field
        self.http = http if http is not None else requests.Session()

        self.token = ''
        self.version = 0
        self._request_id = 0
        self._lock = threading.Lock()

        self._log(f'url: {self.url}')

    @classmethod
    def from_config(cls, config: Optional[ZabbixConfig] = None) -> 'Session':
        """
        Build a session from configuration, detect the version and log in

        Uses the API token when one is configured, otherwise the username
        and password.

        Raises:
            ValueError: If the URL or every authentication method is missing
        """
        config = config or current_config()
        if not config.zabbix_token and not (config.zabbix_user and config.zabbix_password):
            raise ValueError(
                'No authentication method configured. '
                'Set ZABBIX_TOKEN or ZABBIX_USER/ZABBIX_PASSWORD'
            )

        session = cls(
            config.zabbix_url,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            debug=config.debug,
            login_field=config.login_field,
        )
        try:
            session.detect_version()
            if config.zabbix_token:
                session.set_token(config.zabbix_token)
            else:
                session.login(config.zabbix_user, config.zabbix_password)
        except Exception:
            session.close()
            raise
        return session

    def __enter__(self) -> 'Session':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Release the HTTP client"""
        self.http.close()

    @property
    def authenticated(self) -> bool:
        return bool(self.token)

    def set_token(self, token: str) -> None:
        """Use a pre-issued API token instead of logging in"""
        self.token = token

    def _log(self, message: str, *args: Any) -> None:
        debug_log(message, *args, enabled=self.debug)

    def _next_id(self) -> int:
        with self._lock:
            self._request_id += 1
            return self._request_id

    def invoke(self, method: str, params: Optional[Params] = None) -> Any:
        """
        Call a remote method and return its raw result

        Args:
            method: Zabbix API method (e.g., 'host.get', 'item.create')
            params: Parameters passed through verbatim

        Returns:
            The decoded "result" member, a list or a mapping for most methods

        Raises:
            NotAuthenticatedError: If the method needs a token and none is held
            TransportError: If the HTTP call fails or returns a non-2xx status
            DecodeError: If the body is not a matching JSON-RPC response
            RemoteError: If the server answered with an error object
        """
        if params is None:
            params = {}

        needs_auth = method not in UNAUTHENTICATED_METHODS
        if needs_auth and not self.token:
            raise NotAuthenticatedError(method)

        request_id = self._next_id()
        body = {
            'jsonrpc': '2.0',
            'method': method,
            'params': params,
            'id': request_id
        }
        headers = {'Content-Type': 'application/json-rpc'}

        if needs_auth:
            if self.version >= BEARER_AUTH_SINCE:
                headers['Authorization'] = f'Bearer {self.token}'
            else:
                body['auth'] = self.token

        if method == 'user.login':
            self._log(f'Calling {method} (id={request_id})')
        else:
            self._log(f'Calling {method} (id={request_id})', params)

        try:
            response = self.http.post(
                self.url,
                json=body,
                headers=headers,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as exc:
            self._log(f'{method} failed:', str(exc))
            raise TransportError(f'Failed to call {method}: {exc}') from exc

        if not response.ok:
            self._log(f'{method} failed:', f'{response.status_code} {response.text}')
            raise TransportError(
                f'Zabbix API request failed ({response.status_code}): '
                f'{response.text or response.reason}',
                status_code=response.status_code,
            )

        result = self._decode_response(method, request_id, response.text)
        self._log(f'{method} completed successfully')
        return result

    def _decode_response(self, method: str, request_id: int, text: str) -> Any:
        if not text:
            raise DecodeError(f'Empty response from {method}')

        try:
            envelope = Response.model_validate_json(text)
        except ValidationError as exc:
            raise DecodeError(f'Invalid response from {method}: {exc}') from exc

        has_result = 'result' in envelope.model_fields_set
        if envelope.error is not None:
            if has_result:
                raise DecodeError(f'Response to {method} carries both result and error')
            error = envelope.error
            self._log(f'{method} failed:', error.model_dump())
            raise RemoteError(error.code, error.message, error.data)

        if not has_result:
            raise DecodeError(f'Response to {method} carries neither result nor error')
        if envelope.id != request_id:
            raise DecodeError(
                f'Response id {envelope.id} does not match request id {request_id} for {method}'
            )
        return envelope.result

    def decode(self, raw: Any, target: Type[T], what: str = 'result') -> T:
        """
        Validate a raw value into a typed destination

        Args:
            raw: Value as returned by invoke()
            target: Model class or typing form, e.g. List[Host]
            what: Name used in error messages

        Raises:
            DecodeError: If the value does not fit the target
        """
        try:
            return _adapter(target).validate_python(raw, context={'version': self.version})
        except ValidationError as exc:
            raise DecodeError(f'Could not decode {what}: {exc}') from exc

    def invoke_and_decode(self, method: str, params: Optional[Params], target: Type[T]) -> T:
        """
        Call a remote method and decode its result into ``target``

        Numbers sent for string fields are accepted, and nested objects the
        server sends as ``[]`` decode as absent.

        Raises:
            Everything invoke() raises, and DecodeError when the result
            does not fit the target
        """
        raw = self.invoke(method, params)
        return self.decode(raw, target, what=f'{method} result')

    def _login_field(self) -> str:
        if self.login_field:
            return self.login_field
        if not self.version:
            return 'username'
        return version_field(self.version, 'user', 'username', LOGIN_USERNAME_SINCE)

    def login(self, username: str, password: str) -> str:
        """
        Authenticate with username/password and keep the session token

        Returns:
            The session token

        Raises:
            AuthError: If the server rejects the login
            DecodeError: If the server answers without a token
        """
        field = self._login_field()
        self._log(f'Authenticating user: {username}')

        try:
            token = self.invoke('user.login', {field: username, 'password': password})
        except RemoteError as exc:
            raise AuthError(exc.code, exc.message, exc.data) from exc

        if not isinstance(token, str) or not token:
            raise DecodeError('user.login did not return a session token')

        self.token = token
        self._log('Authentication successful')
        return token

    def detect_version(self) -> int:
        """
        Ask the server for its version and remember it

        Returns:
            The version as an integer, e.g. 70000 for 7.0.0
        """
        raw = self.invoke('apiinfo.version', {})
        if not isinstance(raw, str):
            raise DecodeError(f'apiinfo.version returned {type(raw).__name__}, expected a string')
        self.version = parse_version(raw)
        self._log(f'Detected Zabbix version {raw} ({self.version})')
        return self.version

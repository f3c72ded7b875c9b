"""
Zabbix API Configuration

This module manages configuration for Zabbix API sessions.
Configuration can be set via:
1. Environment variables (or a config.env file next to this module)
2. Direct configuration via set_config()

The configuration is read once, when a session is built with
Session.from_config().

Example using environment variables:
    # Create config.env file
    ZABBIX_URL=https://zabbix.example.com
    ZABBIX_USER=Admin
    ZABBIX_PASSWORD=zabbix

Example direct configuration:
    from zabbix_rpc.config import set_config

    set_config({
        'zabbix_url': 'https://zabbix.example.com',
        'zabbix_token': 'your-api-token'
    })
"""

import os
from typing import Optional, Dict, Any
from pathlib import Path


RPC_ENDPOINT = '/api_jsonrpc.php'


def _load_config_env():
    """Load environment variables from config.env file if it exists."""
    config_file = Path(__file__).parent / "config.env"
    if not config_file.exists():
        return

    with config_file.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            # Real environment variables win over the file
            os.environ.setdefault(key, value)


_load_config_env()


class ZabbixConfig:
    """Zabbix API configuration"""

    def __init__(self):
        self.zabbix_url: str = os.getenv('ZABBIX_URL', '')
        self.zabbix_token: Optional[str] = os.getenv('ZABBIX_TOKEN')
        self.zabbix_user: Optional[str] = os.getenv('ZABBIX_USER')
        self.zabbix_password: Optional[str] = os.getenv('ZABBIX_PASSWORD')
        self.login_field: Optional[str] = os.getenv('ZABBIX_LOGIN_FIELD') or None
        self.timeout: int = int(os.getenv('REQUEST_TIMEOUT', '30'))
        self.debug: bool = os.getenv('DEBUG', '').lower() == 'true'
        self.verify_ssl: bool = os.getenv('VERIFY_SSL', 'true').lower() == 'true'


_config = ZabbixConfig()


def get_config() -> Dict[str, Any]:
    """
    Get current configuration

    Returns:
        Dictionary containing current configuration
    """
    return {
        'zabbix_url': _config.zabbix_url,
        'zabbix_token': _config.zabbix_token,
        'zabbix_user': _config.zabbix_user,
        'zabbix_password': _config.zabbix_password,
        'login_field': _config.login_field,
        'timeout': _config.timeout,
        'debug': _config.debug,
        'verify_ssl': _config.verify_ssl
    }


def set_config(new_config: Dict[str, Any]) -> None:
    """
    Set configuration (merges with existing config)

    Args:
        new_config: Dictionary with configuration values to update

    Raises:
        ValueError: If login_field is not 'user' or 'username'

    Example:
        set_config({
            'zabbix_url': 'https://zabbix.example.com',
            'zabbix_user': 'Admin',
            'zabbix_password': 'zabbix'
        })
    """
    if new_config.get('login_field') not in (None, 'user', 'username'):
        raise ValueError(
            f"login_field must be 'user' or 'username', got {new_config['login_field']!r}"
        )

    for key in get_config():
        if key in new_config:
            setattr(_config, key, new_config[key])

    debug_log(
        'Configuration updated: '
        f'zabbix_url={_config.zabbix_url}, '
        f'has_token={bool(_config.zabbix_token)}, '
        f'has_user={bool(_config.zabbix_user)}, '
        f'timeout={_config.timeout}'
    )


def reset_config() -> None:
    """Reset configuration to defaults (from environment variables)"""
    global _config
    _config = ZabbixConfig()


def current_config() -> ZabbixConfig:
    """Get the live configuration object"""
    return _config


def get_zabbix_api_url(url: Optional[str] = None) -> str:
    """
    Get Zabbix API URL

    Args:
        url: Base URL of the Zabbix frontend; defaults to the configured one

    Returns:
        Full URL to Zabbix API endpoint

    Raises:
        ValueError: If Zabbix URL is not configured
    """
    url = url if url is not None else _config.zabbix_url
    if not url:
        raise ValueError(
            'Zabbix URL not configured. Set ZABBIX_URL environment variable '
            'or call set_config()'
        )

    base_url = url.rstrip('/')
    if base_url.endswith(RPC_ENDPOINT):
        return base_url
    return f'{base_url}{RPC_ENDPOINT}'


def debug_log(message: str, *args: Any, enabled: Optional[bool] = None) -> None:
    """
    Debug log helper

    Args:
        message: Log message
        *args: Additional arguments to print
        enabled: Override the configured debug flag (sessions pass their own)
    """
    if enabled is None:
        enabled = _config.debug
    if enabled:
        if args:
            print(f'[Zabbix API] {message}', *args)
        else:
            print(f'[Zabbix API] {message}')

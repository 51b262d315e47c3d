"""
Client configuration for the Zoom Python SDK

Provides the client settings dataclass and loaders that read credentials and
settings from environment variables or a JSON document.
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlparse

from ..exceptions import ConfigError, ValidationError
from ..signing.jwt_signer import DEFAULT_TOKEN_TTL_MS
from ..version import __version__

DEFAULT_BASE_URL = "https://api.zoom.us/v2/"

ENV_API_KEY = "ZOOM_API_KEY"
ENV_API_SECRET = "ZOOM_API_SECRET"
ENV_BASE_URL = "ZOOM_BASE_URL"
ENV_TOKEN_TTL_MS = "ZOOM_TOKEN_TTL_MS"
ENV_TIMEOUT = "ZOOM_TIMEOUT"
ENV_RAISE_TRANSPORT_ERRORS = "ZOOM_RAISE_TRANSPORT_ERRORS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass
class ZoomClientConfig:
    """Zoom client configuration"""
    base_url: str = DEFAULT_BASE_URL
    token_ttl_ms: int = DEFAULT_TOKEN_TTL_MS

    # None leaves the transport's own default in place
    timeout: Optional[float] = None

    # Raise TransportError instead of resolving to None
    raise_transport_errors: bool = False

    debug_logging: bool = False
    user_agent: str = f"zoom-python-sdk/{__version__}"
    default_headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration"""
        if not self.base_url:
            raise ValidationError("Base URL cannot be empty")

        if not self.base_url.endswith('/'):
            self.base_url += '/'

        parsed = urlparse(self.base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValidationError(f"Invalid base URL format: {self.base_url}")

        if isinstance(self.token_ttl_ms, bool) or not isinstance(self.token_ttl_ms, int) or self.token_ttl_ms <= 0:
            raise ValidationError("Token TTL must be a positive integer")

        if self.timeout is not None and self.timeout <= 0:
            raise ValidationError("Timeout must be positive")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ZoomClientConfig':
        """Build a config from a mapping, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(
                f"Unknown client settings: {', '.join(sorted(unknown))}",
                "INVALID_FORMAT"
            )
        return cls(**data)


@dataclass
class ZoomSettings:
    """Credentials plus client configuration"""
    api_key: str
    api_secret: str = field(repr=False)
    client: ZoomClientConfig = field(default_factory=ZoomClientConfig)


def load_settings_from_env(env: Optional[Mapping[str, str]] = None) -> ZoomSettings:
    """
    Load settings from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Returns:
        ZoomSettings: Loaded settings

    Raises:
        ConfigError: If a required variable is missing or a value is invalid
    """
    env = os.environ if env is None else env

    missing = [name for name in (ENV_API_KEY, ENV_API_SECRET) if not env.get(name)]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}",
            "MISSING_KEY"
        )

    client_kwargs: Dict[str, Any] = {}
    if env.get(ENV_BASE_URL):
        client_kwargs['base_url'] = env[ENV_BASE_URL]
    if env.get(ENV_TOKEN_TTL_MS):
        client_kwargs['token_ttl_ms'] = _parse_number(ENV_TOKEN_TTL_MS, env[ENV_TOKEN_TTL_MS], int)
    if env.get(ENV_TIMEOUT):
        client_kwargs['timeout'] = _parse_number(ENV_TIMEOUT, env[ENV_TIMEOUT], float)
    if ENV_RAISE_TRANSPORT_ERRORS in env:
        client_kwargs['raise_transport_errors'] = _parse_bool(
            ENV_RAISE_TRANSPORT_ERRORS, env[ENV_RAISE_TRANSPORT_ERRORS]
        )

    try:
        client = ZoomClientConfig(**client_kwargs)
    except ValidationError as e:
        raise ConfigError(f"Invalid client settings: {e}", "INVALID_VALUE")

    return ZoomSettings(
        api_key=env[ENV_API_KEY],
        api_secret=env[ENV_API_SECRET],
        client=client
    )


def load_settings_from_json(json_string: str) -> ZoomSettings:
    """
    Load settings from a JSON document.

    The document is an object with ``api_key``, ``api_secret`` and an
    optional ``client`` object holding ZoomClientConfig fields.

    Raises:
        ConfigError: If the document cannot be parsed or is incomplete
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse settings JSON: {e}", "PARSE_ERROR")

    if not isinstance(data, dict):
        raise ConfigError("Settings JSON must be an object", "INVALID_FORMAT")

    missing = [key for key in ('api_key', 'api_secret') if not data.get(key)]
    if missing:
        raise ConfigError(f"Missing required settings: {', '.join(missing)}", "MISSING_KEY")

    client_data = data.get('client')
    if client_data is None:
        client_data = {}
    elif not isinstance(client_data, dict):
        raise ConfigError("'client' settings must be an object", "INVALID_FORMAT")

    try:
        client = ZoomClientConfig.from_dict(client_data)
    except (TypeError, ValidationError) as e:
        raise ConfigError(f"Invalid client settings: {e}", "INVALID_VALUE")

    return ZoomSettings(api_key=data['api_key'], api_secret=data['api_secret'], client=client)


def load_settings_from_file(file_path: Union[str, Path]) -> ZoomSettings:
    """Load settings from a JSON file"""
    path = Path(file_path)
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}", "FILE_NOT_FOUND")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            json_string = f.read()
    except OSError as e:
        raise ConfigError(f"Failed to read settings file: {e}", "FILE_ERROR")

    return load_settings_from_json(json_string)


def _parse_number(name: str, raw: str, kind):
    try:
        return kind(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}", "INVALID_VALUE")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}", "INVALID_VALUE")

"""
Zoom Python SDK
Signed-request async client for the Zoom REST API
"""

from .version import __version__
from .exceptions import (
    ZoomSDKError,
    ValidationError,
    ConfigError,
    TransportError,
)
from .signing import (
    # Types
    ZoomCredentials,
    SignedToken,
    SigningError,
    SigningErrorCodes,
    TokenAlgorithm,
    # Signing
    JWTSigner,
    DEFAULT_TOKEN_TTL_MS,
    create_signer,
    mint_token,
    decode_token,
)
from .telemetry import (
    MetricsSink,
    MetricEvent,
    MetricKind,
    NullMetricsSink,
    InMemoryMetricsSink,
    LoggingMetricsSink,
    REQUEST_EXCEPTION_METRIC,
    path_prefix,
    latency_metric_name,
    status_metric_name,
)
from .config import (
    ZoomClientConfig,
    ZoomSettings,
    DEFAULT_BASE_URL,
    load_settings_from_env,
    load_settings_from_json,
    load_settings_from_file,
)
from .http_clients import (
    ZoomClient,
    HttpMethod,
    RequestSpec,
    ResponseEnvelope,
    create_zoom_client,
    create_zoom_client_from_env,
    create_zoom_client_from_file,
)

# Public API exports
__all__ = [
    '__version__',
    # Exceptions
    'ZoomSDKError',
    'ValidationError',
    'ConfigError',
    'TransportError',
    'SigningError',
    'SigningErrorCodes',
    # Token Signing
    'ZoomCredentials',
    'SignedToken',
    'TokenAlgorithm',
    'JWTSigner',
    'DEFAULT_TOKEN_TTL_MS',
    'create_signer',
    'mint_token',
    'decode_token',
    # Telemetry
    'MetricsSink',
    'MetricEvent',
    'MetricKind',
    'NullMetricsSink',
    'InMemoryMetricsSink',
    'LoggingMetricsSink',
    'REQUEST_EXCEPTION_METRIC',
    'path_prefix',
    'latency_metric_name',
    'status_metric_name',
    # Configuration
    'ZoomClientConfig',
    'ZoomSettings',
    'DEFAULT_BASE_URL',
    'load_settings_from_env',
    'load_settings_from_json',
    'load_settings_from_file',
    # HTTP Client
    'ZoomClient',
    'HttpMethod',
    'RequestSpec',
    'ResponseEnvelope',
    'create_zoom_client',
    'create_zoom_client_from_env',
    'create_zoom_client_from_file',
]

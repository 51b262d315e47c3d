"""
Zoom Python SDK - Token Signing Module

Short-lived HMAC-signed JWTs for authenticating against the Zoom REST API.
"""

from .types import (
    ZoomCredentials,
    SignedToken,
    SigningError,
    SigningErrorCodes,
    TokenAlgorithm,
)

from .jwt_signer import (
    JWTSigner,
    DEFAULT_TOKEN_TTL_MS,
    create_signer,
    mint_token,
    decode_token,
)

from .utils import (
    current_time_ms,
    normalize_header_name,
    normalize_headers,
    merge_headers,
    PerformanceTimer,
)

# Public API exports
__all__ = [
    # Types
    'ZoomCredentials',
    'SignedToken',
    'SigningError',
    'SigningErrorCodes',
    'TokenAlgorithm',
    # Signing
    'JWTSigner',
    'DEFAULT_TOKEN_TTL_MS',
    'create_signer',
    'mint_token',
    'decode_token',
    # Utilities
    'current_time_ms',
    'normalize_header_name',
    'normalize_headers',
    'merge_headers',
    'PerformanceTimer',
]

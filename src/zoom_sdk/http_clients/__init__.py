"""
HTTP client module for Zoom SDK

This module provides the async signed-request client for the Zoom REST API,
including per-call token minting, response normalization and telemetry.
"""

from .zoom_client import (
    # Core client
    ZoomClient,
    HttpMethod,
    RequestSpec,
    ResponseEnvelope,
    JSON_CONTENT_TYPE,
    with_json_content_type,

    # Factory functions
    create_zoom_client,
    create_zoom_client_from_env,
    create_zoom_client_from_file,
)

__all__ = [
    'ZoomClient',
    'HttpMethod',
    'RequestSpec',
    'ResponseEnvelope',
    'JSON_CONTENT_TYPE',
    'with_json_content_type',
    'create_zoom_client',
    'create_zoom_client_from_env',
    'create_zoom_client_from_file',
]

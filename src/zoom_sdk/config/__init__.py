"""
Configuration management for Zoom Python SDK

This module provides client settings and loaders for environment variables
and JSON files.
"""

from .client_config import (
    ZoomClientConfig,
    ZoomSettings,
    DEFAULT_BASE_URL,
    DEFAULT_TOKEN_TTL_MS,
    load_settings_from_env,
    load_settings_from_json,
    load_settings_from_file,
)

__all__ = [
    'ZoomClientConfig',
    'ZoomSettings',
    'DEFAULT_BASE_URL',
    'DEFAULT_TOKEN_TTL_MS',
    'load_settings_from_env',
    'load_settings_from_json',
    'load_settings_from_file',
]

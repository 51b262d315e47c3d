"""
Exception classes for Zoom Python SDK
"""

from typing import Optional, Dict, Any


class ZoomSDKError(Exception):
    """Base exception for all Zoom SDK errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(ZoomSDKError):
    """Exception raised for invalid request or configuration values"""
    
    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ConfigError(ZoomSDKError):
    """Exception raised when client settings cannot be loaded"""
    
    def __init__(self, message: str, error_code: str = "CONFIG_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class TransportError(ZoomSDKError):
    """
    Exception raised for network failures or unreadable responses.
    
    Only surfaced to callers when the client is configured with
    ``raise_transport_errors=True``; otherwise the failure is counted and
    the call resolves to ``None``.
    """
    
    def __init__(self, message: str, error_code: str = "TRANSPORT_ERROR",
                 http_status: int = 0, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.http_status = http_status

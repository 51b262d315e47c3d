"""
Type definitions for token signing

This module provides the credential and token value types used to mint the
short-lived JWTs presented to the Zoom API on every request.
"""

from typing import Dict, Optional, Union, Callable, Any
from dataclasses import dataclass, field
from enum import Enum


class TokenAlgorithm(str, Enum):
    """HMAC algorithms accepted for token signing"""
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"


class SigningError(Exception):
    """
    Error class for signing operations

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.code}, details: {self.details})"
        return f"{self.message} (code: {self.code})"

    def __repr__(self) -> str:
        return f"SigningError(message='{self.message}', code='{self.code}', details={self.details})"


class SigningErrorCodes:
    """Standard error codes for signing operations"""

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_KEY_ID = "INVALID_KEY_ID"
    INVALID_SECRET = "INVALID_SECRET"
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"

    # Signing errors
    SIGNING_FAILED = "SIGNING_FAILED"

    # Verification errors
    INVALID_TOKEN = "INVALID_TOKEN"


@dataclass(frozen=True)
class ZoomCredentials:
    """
    API key and secret issued for a Zoom JWT app

    Attributes:
        api_key: Key identifier, sent as the token issuer
        api_secret: Shared secret used to sign tokens
    """
    api_key: str
    api_secret: Union[str, bytes] = field(repr=False)

    def __post_init__(self):
        """Validate credentials"""
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise SigningError(
                "API key must be a non-empty string",
                SigningErrorCodes.INVALID_KEY_ID
            )

        if not isinstance(self.api_secret, (str, bytes)):
            raise SigningError(
                "API secret must be a string or bytes",
                SigningErrorCodes.INVALID_SECRET,
                {"type": type(self.api_secret).__name__}
            )

        if not self.api_secret.strip():
            raise SigningError(
                "API secret cannot be empty",
                SigningErrorCodes.INVALID_SECRET
            )


@dataclass(frozen=True)
class SignedToken:
    """
    A minted bearer token

    Attributes:
        token: Encoded JWT
        issuer: Value of the ``iss`` claim
        issued_at_ms: Mint time in Unix milliseconds
        expires_at_ms: Expiry in Unix milliseconds
    """
    token: str
    issuer: str
    issued_at_ms: int
    expires_at_ms: int

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.token}"

    @property
    def ttl_ms(self) -> int:
        return self.expires_at_ms - self.issued_at_ms

    @property
    def claims(self) -> Dict[str, Any]:
        """Payload that was signed"""
        return {"iss": self.issuer, "exp": self.expires_at_ms / 1000}


# Type aliases for convenience
Clock = Callable[[], float]
HeaderDict = Dict[str, str]

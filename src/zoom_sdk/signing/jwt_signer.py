"""
JWT token signer for Zoom API authentication

This module mints the short-lived bearer tokens Zoom JWT apps expect: an
HMAC-signed JWT whose issuer is the API key and whose expiry is a few
seconds after minting. Tokens are never cached; every request gets a fresh
one.
"""

import logging
import time
from typing import Any, Dict, Optional, Union

import jwt

from .types import (
    Clock,
    SignedToken,
    SigningError,
    SigningErrorCodes,
    TokenAlgorithm,
    ZoomCredentials,
)
from .utils import current_time_ms, PerformanceTimer

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL_MS = 5000


class JWTSigner:
    """
    Mints signed JWTs from a set of Zoom credentials.

    The signer holds no per-token state, so a single instance can be shared
    by concurrent requests.
    """

    def __init__(
        self,
        credentials: ZoomCredentials,
        ttl_ms: int = DEFAULT_TOKEN_TTL_MS,
        clock: Optional[Clock] = None,
        algorithm: Union[TokenAlgorithm, str] = TokenAlgorithm.HS256
    ):
        """
        Initialize the signer.

        Args:
            credentials: API key and secret
            ttl_ms: Token lifetime in milliseconds
            clock: Callable returning Unix seconds (defaults to time.time)
            algorithm: HMAC algorithm used to sign tokens

        Raises:
            SigningError: If any argument is invalid
        """
        if not isinstance(credentials, ZoomCredentials):
            raise SigningError(
                "Credentials must be a ZoomCredentials instance",
                SigningErrorCodes.INVALID_CONFIG
            )

        if isinstance(ttl_ms, bool) or not isinstance(ttl_ms, int) or ttl_ms <= 0:
            raise SigningError(
                "Token TTL must be a positive number of milliseconds",
                SigningErrorCodes.INVALID_CONFIG,
                {"ttl_ms": ttl_ms}
            )

        try:
            self.algorithm = TokenAlgorithm(algorithm)
        except ValueError:
            raise SigningError(
                f"Unsupported token algorithm: {algorithm}",
                SigningErrorCodes.UNSUPPORTED_ALGORITHM,
                {"algorithm": str(algorithm)}
            )

        self.credentials = credentials
        self.ttl_ms = ttl_ms
        self.clock = clock or time.time

    @property
    def issuer(self) -> str:
        return self.credentials.api_key

    def build_claims(self, now_ms: int) -> Dict[str, Any]:
        """
        Build the token payload for a given mint time.

        ``exp`` is a JWT NumericDate in seconds, kept at millisecond
        precision so tokens minted at different instants differ.
        """
        return {
            "iss": self.issuer,
            "exp": (now_ms + self.ttl_ms) / 1000,
        }

    def mint(self) -> SignedToken:
        """
        Mint a new signed token.

        Returns:
            SignedToken: Encoded token and its claims

        Raises:
            SigningError: If the token cannot be signed
        """
        timer = PerformanceTimer()
        now_ms = current_time_ms(self.clock)
        claims = self.build_claims(now_ms)

        try:
            token = jwt.encode(
                claims,
                self.credentials.api_secret,
                algorithm=self.algorithm.value
            )
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise SigningError(
                f"Token signing failed: {e}",
                SigningErrorCodes.SIGNING_FAILED,
                {"algorithm": self.algorithm.value, "original_error": str(e)}
            )

        # PyJWT < 2 returned bytes
        if isinstance(token, bytes):
            token = token.decode("ascii")

        logger.debug(f"Minted token for issuer {self.issuer} in {timer.elapsed_ms():.2f}ms")

        return SignedToken(
            token=token,
            issuer=self.issuer,
            issued_at_ms=now_ms,
            expires_at_ms=now_ms + self.ttl_ms
        )


def create_signer(
    api_key: str,
    api_secret: Union[str, bytes],
    ttl_ms: int = DEFAULT_TOKEN_TTL_MS,
    clock: Optional[Clock] = None
) -> JWTSigner:
    """
    Create a signer from raw credential values.

    Raises:
        SigningError: If the credentials are malformed
    """
    return JWTSigner(ZoomCredentials(api_key, api_secret), ttl_ms=ttl_ms, clock=clock)


def mint_token(
    api_key: str,
    api_secret: Union[str, bytes],
    ttl_ms: int = DEFAULT_TOKEN_TTL_MS
) -> SignedToken:
    """Mint a single token from raw credential values."""
    return create_signer(api_key, api_secret, ttl_ms=ttl_ms).mint()


def decode_token(
    token: str,
    api_secret: Union[str, bytes],
    verify_exp: bool = True,
    algorithm: Union[TokenAlgorithm, str] = TokenAlgorithm.HS256
) -> Dict[str, Any]:
    """
    Verify a token against the secret and return its claims.

    Args:
        token: Encoded JWT
        api_secret: Secret the token should have been signed with
        verify_exp: Reject expired tokens
        algorithm: Expected signing algorithm

    Returns:
        dict: Decoded claims

    Raises:
        SigningError: If the signature or claims are invalid
    """
    try:
        return jwt.decode(
            token,
            api_secret,
            algorithms=[TokenAlgorithm(algorithm).value],
            options={"verify_exp": verify_exp}
        )
    except (jwt.PyJWTError, ValueError) as e:
        raise SigningError(
            f"Token verification failed: {e}",
            SigningErrorCodes.INVALID_TOKEN,
            {"original_error": str(e)}
        )

"""
Test suite for JWT token minting

This module tests credential validation, token claims, expiry handling and
verification of minted tokens against the configured secret.
"""

import time
from unittest.mock import patch

import jwt
import pytest

from zoom_sdk.signing import (
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
    # Utilities
    current_time_ms,
    merge_headers,
    normalize_headers,
    PerformanceTimer,
)

API_KEY = "test-api-key"
API_SECRET = "test-api-secret-0123456789abcdef0123456789abcdef0123456789abcdef"
FIXED_NOW = 1_700_000_000.123


class TestZoomCredentials:
    """Test credential validation"""

    def test_valid_credentials(self):
        """Test creating credentials with string and bytes secrets"""
        creds = ZoomCredentials(API_KEY, API_SECRET)
        assert creds.api_key == API_KEY
        assert creds.api_secret == API_SECRET

        creds = ZoomCredentials(API_KEY, API_SECRET.encode())
        assert creds.api_secret == API_SECRET.encode()

    def test_secret_not_in_repr(self):
        """Test the secret never shows up in repr"""
        creds = ZoomCredentials(API_KEY, API_SECRET)
        assert API_SECRET not in repr(creds)
        assert API_KEY in repr(creds)

    def test_credentials_are_immutable(self):
        """Test credentials cannot be reassigned"""
        creds = ZoomCredentials(API_KEY, API_SECRET)
        with pytest.raises(AttributeError):
            creds.api_key = "other"

    @pytest.mark.parametrize("api_key", ["", "   ", None, 123])
    def test_invalid_api_key(self, api_key):
        """Test malformed API keys are rejected"""
        with pytest.raises(SigningError) as exc_info:
            ZoomCredentials(api_key, API_SECRET)
        assert exc_info.value.code == SigningErrorCodes.INVALID_KEY_ID

    @pytest.mark.parametrize("api_secret", ["", "  ", b"", None, 42])
    def test_invalid_api_secret(self, api_secret):
        """Test malformed secrets are rejected"""
        with pytest.raises(SigningError) as exc_info:
            ZoomCredentials(API_KEY, api_secret)
        assert exc_info.value.code == SigningErrorCodes.INVALID_SECRET


class TestJWTSigner:
    """Test token minting"""

    def setup_method(self):
        """Set up test fixtures"""
        self.credentials = ZoomCredentials(API_KEY, API_SECRET)

    def test_mint_claims(self):
        """Test issuer and expiry claims of a minted token"""
        signer = JWTSigner(self.credentials, clock=lambda: FIXED_NOW)
        token = signer.mint()

        assert isinstance(token, SignedToken)
        assert token.issuer == API_KEY
        assert token.issued_at_ms == 1_700_000_000_123
        assert token.expires_at_ms == 1_700_000_005_123
        assert token.ttl_ms == DEFAULT_TOKEN_TTL_MS

        claims = decode_token(token.token, API_SECRET, verify_exp=False)
        assert claims == {"iss": API_KEY, "exp": pytest.approx(1_700_000_005.123)}
        assert token.claims == claims

    def test_authorization_header(self):
        """Test bearer header formatting"""
        token = JWTSigner(self.credentials).mint()
        assert token.authorization_header == f"Bearer {token.token}"

    def test_token_verifies_with_secret(self):
        """Test a fresh token validates against the configured secret"""
        token = JWTSigner(self.credentials).mint()

        claims = jwt.decode(token.token, API_SECRET, algorithms=["HS256"])
        assert claims["iss"] == API_KEY

        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(token.token, "other-api-secret-0123456789abcdef0123456789abcdef0123456789abcdef", algorithms=["HS256"])

    def test_expiry_is_five_seconds_after_mint(self):
        """Test expiry against the real clock"""
        before = time.time()
        token = JWTSigner(self.credentials).mint()
        after = time.time()

        claims = decode_token(token.token, API_SECRET)
        assert before + 5 - 0.01 <= claims["exp"] <= after + 5 + 0.01

    def test_custom_ttl(self):
        """Test a non-default token lifetime"""
        signer = JWTSigner(self.credentials, ttl_ms=30_000, clock=lambda: FIXED_NOW)
        token = signer.mint()
        assert token.expires_at_ms - token.issued_at_ms == 30_000

    def test_tokens_are_not_cached(self):
        """Test tokens minted at different times differ"""
        now = [FIXED_NOW]
        signer = JWTSigner(self.credentials, clock=lambda: now[0])

        first = signer.mint()
        now[0] += 0.001
        second = signer.mint()

        assert first.token != second.token
        assert second.expires_at_ms - first.expires_at_ms == 1

    def test_expired_token_rejected(self):
        """Test an old token fails verification"""
        signer = JWTSigner(self.credentials, clock=lambda: time.time() - 60)
        token = signer.mint()

        with pytest.raises(SigningError) as exc_info:
            decode_token(token.token, API_SECRET)
        assert exc_info.value.code == SigningErrorCodes.INVALID_TOKEN

    @pytest.mark.parametrize("algorithm", list(TokenAlgorithm))
    def test_algorithms(self, algorithm):
        """Test every supported HMAC algorithm"""
        token = JWTSigner(self.credentials, algorithm=algorithm).mint()
        assert jwt.get_unverified_header(token.token)["alg"] == algorithm.value
        assert decode_token(token.token, API_SECRET, algorithm=algorithm)["iss"] == API_KEY

    def test_invalid_signer_configuration(self):
        """Test signer argument validation"""
        with pytest.raises(SigningError) as exc_info:
            JWTSigner(self.credentials, ttl_ms=0)
        assert exc_info.value.code == SigningErrorCodes.INVALID_CONFIG

        with pytest.raises(SigningError) as exc_info:
            JWTSigner(self.credentials, algorithm="RS256")
        assert exc_info.value.code == SigningErrorCodes.UNSUPPORTED_ALGORITHM

        with pytest.raises(SigningError) as exc_info:
            JWTSigner({"api_key": API_KEY, "api_secret": API_SECRET})
        assert exc_info.value.code == SigningErrorCodes.INVALID_CONFIG

    @patch('zoom_sdk.signing.jwt_signer.jwt.encode')
    def test_encode_failure_wrapped(self, mock_encode):
        """Test PyJWT failures surface as SigningError"""
        mock_encode.side_effect = jwt.PyJWTError("boom")

        with pytest.raises(SigningError) as exc_info:
            JWTSigner(self.credentials).mint()
        assert exc_info.value.code == SigningErrorCodes.SIGNING_FAILED
        assert "boom" in str(exc_info.value)


class TestSigningHelpers:
    """Test module-level helpers"""

    def test_create_signer(self):
        """Test building a signer from raw values"""
        signer = create_signer(API_KEY, API_SECRET, ttl_ms=1000)
        assert signer.issuer == API_KEY
        assert signer.ttl_ms == 1000

        with pytest.raises(SigningError):
            create_signer(API_KEY, "")

    def test_mint_token(self):
        """Test one-shot minting"""
        token = mint_token(API_KEY, API_SECRET)
        assert decode_token(token.token, API_SECRET)["iss"] == API_KEY

    def test_current_time_ms(self):
        """Test millisecond clock conversion"""
        assert current_time_ms(lambda: 1.5) == 1500
        assert abs(current_time_ms() - int(time.time() * 1000)) < 1000

    def test_header_helpers(self):
        """Test case-insensitive header normalization and merging"""
        assert normalize_headers(None) == {}
        assert normalize_headers({"Content-Type": "a"}) == {"content-type": "a"}

        merged = merge_headers(
            {"authorization": "Bearer x", "content-type": "application/json"},
            None,
            {"Content-Type": "text/plain"},
        )
        assert merged == {"authorization": "Bearer x", "content-type": "text/plain"}

    def test_performance_timer(self):
        """Test elapsed time is never negative"""
        timer = PerformanceTimer()
        time.sleep(0.01)
        assert timer.elapsed_ms() >= 10.0 * 0.9


if __name__ == '__main__':
    pytest.main([__file__])

"""
Async HTTP client for the Zoom REST API

This module provides the signed-request client: every call mints a fresh
JWT, performs exactly one HTTP request against the Zoom API, reports latency
and status metrics to the injected sink and returns the decoded payload with
the HTTP status attached under ``http_code``.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..config import ZoomClientConfig, load_settings_from_env, load_settings_from_file
from ..exceptions import TransportError, ValidationError
from ..signing import (
    JWTSigner,
    SignedToken,
    ZoomCredentials,
    PerformanceTimer,
    merge_headers,
    normalize_headers,
)
from ..signing.types import Clock
from ..telemetry import (
    MetricsSink,
    NullMetricsSink,
    REQUEST_EXCEPTION_METRIC,
    latency_metric_name,
    path_prefix,
    status_metric_name,
)

logger = logging.getLogger(__name__)

# Decoded JSON object plus the ``http_code`` key
ResponseEnvelope = Dict[str, Any]

JSON_CONTENT_TYPE = "application/json"
NO_CONTENT = 204


class HttpMethod(str, Enum):
    """HTTP methods supported by the Zoom client"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass
class RequestSpec:
    """
    A single Zoom API call

    Attributes:
        path: Path relative to the API base URL, e.g. ``users/me``
        method: HTTP method
        headers: Extra request headers, names are lower-cased
        body: JSON-serializable payload; nothing is sent when None
    """
    path: str
    method: HttpMethod = HttpMethod.GET
    headers: Optional[Dict[str, str]] = None
    body: Any = None

    def __post_init__(self):
        """Validate and normalize the request"""
        if not isinstance(self.path, str) or not self.path:
            raise ValidationError("Request path cannot be empty")

        if not isinstance(self.method, HttpMethod):
            try:
                self.method = HttpMethod(self.method.upper())
            except (AttributeError, ValueError):
                raise ValidationError(
                    f"Unsupported HTTP method: {self.method}",
                    details={'method': str(self.method)}
                )

        self.headers = validate_headers(self.headers)

    @property
    def prefix(self) -> str:
        """First path segment, used to name metrics"""
        return path_prefix(self.path)


def validate_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Check caller headers and lowercase their names

    Raises:
        ValidationError: If headers are not a mapping of ASCII strings
    """
    if headers is None:
        return {}

    if not isinstance(headers, Mapping):
        raise ValidationError("Headers must be a mapping")

    for name, value in headers.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise ValidationError(
                f"Header {name!r} must have a string name and value",
                details={'header': str(name), 'type': type(value).__name__}
            )
        if not (name + value).isascii():
            raise ValidationError(
                f"Header {name!r} must be ASCII",
                details={'header': name}
            )

    return normalize_headers(headers)


def with_json_content_type(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Add ``content-type: application/json`` unless the caller already set a content type"""
    return merge_headers({'content-type': JSON_CONTENT_TYPE}, validate_headers(headers))


class ZoomClient:
    """
    Signed-request client for the Zoom API

    Each call is independent: a new token is minted, one request is sent
    and no state is shared between concurrent calls. Non-2xx responses are
    returned as ``{"http_code": status}`` rather than raised; network and
    parse failures are counted under ``error.zoom_request_exception`` and
    resolve to None (or raise TransportError when configured to).
    """

    def __init__(
        self,
        api_key: str,
        api_secret: Union[str, bytes],
        metrics: Optional[MetricsSink] = None,
        config: Optional[ZoomClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Optional[Clock] = None
    ):
        """
        Initialize the client

        Args:
            api_key: Zoom API key, used as the token issuer
            api_secret: Zoom API secret, used to sign tokens
            metrics: Telemetry sink (defaults to a sink that discards everything)
            config: Client configuration
            http_client: Optional httpx.AsyncClient to send requests with;
                the client creates and owns one when omitted
            clock: Callable returning Unix seconds, used when minting tokens

        Raises:
            SigningError: If the credentials are malformed
        """
        self.config = config or ZoomClientConfig()
        self.credentials = ZoomCredentials(api_key, api_secret)
        self.signer = JWTSigner(self.credentials, ttl_ms=self.config.token_ttl_ms, clock=clock)
        self.metrics = metrics if metrics is not None else NullMetricsSink()

        self._owns_http_client = http_client is None
        self.http_client = http_client if http_client is not None else self._create_http_client()

        logger.info(f"Zoom client initialized for: {self.config.base_url}")

    def _create_http_client(self) -> httpx.AsyncClient:
        """Create the async transport"""
        kwargs: Dict[str, Any] = {}
        if self.config.timeout is not None:
            kwargs['timeout'] = self.config.timeout
        return httpx.AsyncClient(**kwargs)

    def mint_token(self) -> SignedToken:
        """
        Mint a fresh bearer token

        Raises:
            SigningError: If the token cannot be signed
        """
        return self.signer.mint()

    def build_url(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    def build_headers(self, token: SignedToken, headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
        """Resolve outgoing headers; caller headers override every default"""
        defaults = {'user-agent': self.config.user_agent}
        return merge_headers(
            defaults,
            self.config.default_headers,
            {'authorization': token.authorization_header},
            headers,
        )

    async def execute(self, spec: RequestSpec) -> Optional[ResponseEnvelope]:
        """
        Perform one Zoom API call

        Args:
            spec: Request to send

        Returns:
            dict: Decoded payload with ``http_code``, or None on transport failure

        Raises:
            SigningError: If the token cannot be minted (nothing is sent)
            ValidationError: If the body is not JSON-serializable (nothing is sent)
            TransportError: On transport failure when ``raise_transport_errors`` is set
        """
        prefix = spec.prefix
        token = self.mint_token()
        headers = self.build_headers(token, spec.headers)
        url = self.build_url(spec.path)

        content = None
        if spec.body is not None:
            try:
                content = json.dumps(spec.body)
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"Request body is not JSON serializable: {e}",
                    details={'path': spec.path}
                )

        if self.config.debug_logging:
            logger.debug(f"Making {spec.method.value} request to {url}")

        timer = PerformanceTimer()
        try:
            response = await self.http_client.request(
                spec.method.value,
                url,
                headers=headers,
                content=content
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._handle_transport_error(spec, e)

        elapsed_ms = timer.elapsed_ms()
        status = response.status_code

        self._record_timing(latency_metric_name(prefix, status), elapsed_ms)
        self._record_increment(status_metric_name(prefix, status), 1)

        logger.debug(
            f"{spec.method.value} {spec.path} -> {status} "
            f"(ok={response.is_success}) in {elapsed_ms:.2f}ms"
        )

        try:
            return self._build_envelope(response)
        except ValueError as e:
            return self._handle_transport_error(spec, e, status)

    @staticmethod
    def _build_envelope(response: httpx.Response) -> ResponseEnvelope:
        status = response.status_code

        # 204 has an empty body; non-2xx bodies are not decoded
        if not response.is_success or status == NO_CONTENT:
            return {'http_code': status}

        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        payload['http_code'] = status
        return payload

    def _handle_transport_error(
        self,
        spec: RequestSpec,
        error: Exception,
        status: Optional[int] = None
    ) -> None:
        self._record_increment(REQUEST_EXCEPTION_METRIC, 1)

        message = f"Zoom request {spec.method.value} {spec.path} failed: {error}"
        logger.error(message)
        if self.config.debug_logging:
            logger.exception("Zoom request error details")

        if self.config.raise_transport_errors:
            raise TransportError(
                message,
                http_status=status or 0,
                details={'path': spec.path, 'method': spec.method.value}
            ) from error

        return None

    def _record_timing(self, name: str, ms: float) -> None:
        try:
            self.metrics.timing(name, ms)
        except Exception as e:
            logger.warning(f"Metrics sink failed to record timing {name}: {e}")

    def _record_increment(self, name: str, amount: int) -> None:
        try:
            self.metrics.increment(name, amount)
        except Exception as e:
            logger.warning(f"Metrics sink failed to record counter {name}: {e}")

    async def request(
        self,
        path: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None
    ) -> Optional[ResponseEnvelope]:
        """Send a request to the Zoom API"""
        spec = RequestSpec(path=path, method=method, headers=headers, body=body)
        return await self.execute(spec)

    async def get(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None
    ) -> Optional[ResponseEnvelope]:
        """Send a GET request to Zoom"""
        return await self.request(path, HttpMethod.GET, headers, body)

    async def post(
        self,
        path: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> Optional[ResponseEnvelope]:
        """Send a POST request to Zoom with a JSON body"""
        return await self.request(path, HttpMethod.POST, with_json_content_type(headers), body)

    async def put(
        self,
        path: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> Optional[ResponseEnvelope]:
        """Send a PUT request to Zoom with a JSON body"""
        return await self.request(path, HttpMethod.PUT, with_json_content_type(headers), body)

    async def patch(
        self,
        path: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> Optional[ResponseEnvelope]:
        """Send a PATCH request to Zoom with a JSON body"""
        return await self.request(path, HttpMethod.PATCH, with_json_content_type(headers), body)

    async def delete(
        self,
        path: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> Optional[ResponseEnvelope]:
        """Send a DELETE request to Zoom"""
        return await self.request(path, HttpMethod.DELETE, with_json_content_type(headers), body)

    async def aclose(self) -> None:
        """Close the transport if this client created it"""
        if self._owns_http_client:
            await self.http_client.aclose()
        logger.debug("Zoom client closed")

    async def __aenter__(self) -> 'ZoomClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


# Factory functions
def create_zoom_client(
    api_key: str,
    api_secret: Union[str, bytes],
    metrics: Optional[MetricsSink] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    **config_kwargs
) -> ZoomClient:
    """
    Create a Zoom client

    Args:
        api_key: Zoom API key
        api_secret: Zoom API secret
        metrics: Optional telemetry sink
        http_client: Optional httpx.AsyncClient
        **config_kwargs: ZoomClientConfig fields

    Returns:
        ZoomClient: Configured client
    """
    config = ZoomClientConfig(**config_kwargs)
    return ZoomClient(api_key, api_secret, metrics=metrics, config=config, http_client=http_client)


def create_zoom_client_from_env(
    metrics: Optional[MetricsSink] = None,
    env: Optional[Mapping[str, str]] = None,
    http_client: Optional[httpx.AsyncClient] = None
) -> ZoomClient:
    """Create a Zoom client from ZOOM_* environment variables"""
    settings = load_settings_from_env(env)
    return ZoomClient(
        settings.api_key,
        settings.api_secret,
        metrics=metrics,
        config=settings.client,
        http_client=http_client
    )


def create_zoom_client_from_file(
    file_path: Union[str, Path],
    metrics: Optional[MetricsSink] = None,
    http_client: Optional[httpx.AsyncClient] = None
) -> ZoomClient:
    """Create a Zoom client from a JSON settings file"""
    settings = load_settings_from_file(file_path)
    return ZoomClient(
        settings.api_key,
        settings.api_secret,
        metrics=metrics,
        config=settings.client,
        http_client=http_client
    )

"""HTTP transport for the AWX REST API.

Builds requests from :class:`APIRequest` descriptors, applies the
configured authentication, performs the exchange with httpx and turns the
response into a pydantic-validated value or a typed :mod:`.errors`
exception.
"""

import json
import threading
import time
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Any, TypeAlias

import httpx
import pydantic
import structlog

from .auth import AuthProvider
from .errors import (
    BodyReadError,
    DecodeError,
    NetworkError,
    RequestBuildError,
    SerializationError,
    StatusError,
)

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
METHODS = BODY_METHODS | {"GET", "DELETE"}

Timeout: TypeAlias = float | httpx.Timeout | None


@dataclass(frozen=True)
class APIRequest:
    """Description of a single HTTP exchange, before it is sent.

    Attributes:
        method: HTTP method (GET, POST, PUT, PATCH or DELETE).
        endpoint: Server-relative path, e.g. ``/api/v2/jobs/42/``.
        payload: JSON-serializable value or pydantic model sent as the body.
        headers: Extra headers applied after authentication.
        query: Query string parameters.
    """

    method: str
    endpoint: str
    payload: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] | None = None

    def __post_init__(self):
        method = self.method.upper()
        if method not in METHODS:
            msg = f"unsupported HTTP method: {self.method}"
            raise ValueError(msg)
        if self.payload is not None and method not in BODY_METHODS:
            msg = f"{method} requests cannot carry a payload"
            raise ValueError(msg)
        object.__setattr__(self, "method", method)

    def with_header(self, key: str, value: str) -> "APIRequest":
        """Return a copy of this request with one more header set."""
        return replace(self, headers={**self.headers, key: value})

    @property
    def url_path(self) -> str:
        """Endpoint with the trailing slash AWX expects on non-creation routes."""
        if self.method != "POST" and not self.endpoint.endswith("/"):
            return self.endpoint + "/"
        return self.endpoint


@lru_cache(maxsize=128)
def _adapter(response_type: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(response_type)


def _serialize(payload: Any) -> bytes:
    if isinstance(payload, pydantic.BaseModel):
        payload = payload.model_dump(mode="json", exclude_none=True)
    try:
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        msg = f"cannot encode payload as JSON: {exc}"
        raise SerializationError(msg) from exc


class Transport:
    """Authenticated JSON transport bound to one AWX base URL.

    Configuration is read-only after construction. Unless an
    ``httpx.Client`` is injected, one client is created on first use and
    shared by every thread, including the ones polling runs predicates on.
    Can be used as a context manager.
    """

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
    ):
        """Initialize the transport.

        Args:
            base_url: Absolute origin of the AWX server, optionally with a
                path prefix (e.g. "https://awx.example.com").
            auth: Provider that decorates every request with credentials.
            http_client: Client to use instead of an owned one.
                The transport does not close an injected client.
            timeout: Default request timeout in seconds.
            verify_ssl: Verify TLS certificates on owned clients.

        Raises:
            RequestBuildError: If base_url is not an absolute http(s) URL.
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            msg = f"invalid base URL {base_url!r}: {exc}"
            raise RequestBuildError(msg) from exc
        if url.scheme not in ("http", "https") or not url.host:
            msg = f"base URL must be an absolute http(s) URL, got {base_url!r}"
            raise RequestBuildError(msg)

        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._shared_client = http_client
        self._owned_client: httpx.Client | None = None
        self._client_lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        """Injected client, or the owned one created on first use."""
        if self._shared_client is not None:
            return self._shared_client
        with self._client_lock:
            if self._owned_client is None or self._owned_client.is_closed:
                self._owned_client = httpx.Client(
                    timeout=self._timeout,
                    verify=self._verify_ssl,
                )
            return self._owned_client

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and close the HTTP client."""
        self.close()

    def close(self):
        """Close the owned HTTP client if open."""
        with self._client_lock:
            if self._owned_client is not None and not self._owned_client.is_closed:
                self._owned_client.close()

    def _build(self, ar: APIRequest, timeout: Timeout) -> httpx.Request:
        try:
            url = httpx.URL(self.base_url + ar.url_path)
        except httpx.InvalidURL as exc:
            msg = f"invalid request URL for {ar.url_path!r}: {exc}"
            raise RequestBuildError(msg) from exc

        headers = {"Accept": "application/json"}
        content = None
        if ar.payload is not None:
            content = _serialize(ar.payload)
        if ar.method in BODY_METHODS:
            headers["Content-Type"] = "application/json"

        request = self.client.build_request(
            ar.method,
            url,
            content=content,
            params=ar.query or None,
            headers=headers,
            timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
        )
        if self.auth is not None:
            self.auth.apply(request)
        for key, value in ar.headers.items():
            request.headers[key] = value
        return request

    def do(
        self,
        ar: APIRequest,
        response_type: Any = None,
        *,
        timeout: Timeout = None,
    ) -> Any:
        """Perform the exchange described by ``ar``.

        Args:
            ar: Request descriptor.
            response_type: Type the JSON body is validated into (a pydantic
                model, ``list[Model]``, ``dict``...). ``None`` discards it.
            timeout: Per-call timeout; aborts the exchange when it elapses.

        Returns:
            The validated body, or None when the body is empty or no
            response_type was given.

        Raises:
            RequestBuildError: If the URL cannot be built.
            SerializationError: If the payload is not JSON-serializable.
            NetworkError: If the exchange fails before a response arrives.
            BodyReadError: If the response body cannot be read.
            StatusError: If the status code is outside 200-299.
            DecodeError: If the body does not validate into response_type.
        """
        request = self._build(ar, timeout)
        start_time = time.time()
        logger.debug(
            "Making API request",
            method=ar.method,
            endpoint=ar.url_path,
            params=ar.query,
        )

        try:
            response = self.client.send(request, stream=True)
        except httpx.TransportError as exc:
            logger.exception(
                "API request failed",
                method=ar.method,
                endpoint=ar.url_path,
                duration_seconds=round(time.time() - start_time, 3),
            )
            msg = f"{ar.method} {ar.url_path} failed: {exc}"
            raise NetworkError(msg) from exc

        try:
            try:
                body = response.read()
            except (httpx.HTTPError, httpx.StreamError) as exc:
                msg = f"error reading body: {exc}"
                raise BodyReadError(msg) from exc

            duration = time.time() - start_time
            if not 200 <= response.status_code <= 299:  # noqa: PLR2004
                logger.warning(
                    "API returned error status",
                    method=ar.method,
                    endpoint=ar.url_path,
                    status_code=response.status_code,
                    duration_seconds=round(duration, 3),
                )
                raise StatusError(
                    response.status_code,
                    body.decode("utf-8", errors="replace"),
                )

            logger.debug(
                "API request completed",
                status_code=response.status_code,
                duration_seconds=round(duration, 3),
            )

            # DELETE and some POST actions answer with an empty body.
            if not body or response_type is None:
                return None
            try:
                return _adapter(response_type).validate_json(body)
            except pydantic.ValidationError as exc:
                msg = f"error decoding response body: {exc}"
                raise DecodeError(msg) from exc
        finally:
            response.close()

    def get(
        self,
        endpoint: str,
        response_type: Any = None,
        query: dict[str, str] | None = None,
        *,
        timeout: Timeout = None,
    ) -> Any:
        """Perform a GET request."""
        ar = APIRequest("GET", endpoint, query=query)
        return self.do(ar, response_type, timeout=timeout)

    def post(
        self,
        endpoint: str,
        payload: Any = None,
        response_type: Any = None,
        query: dict[str, str] | None = None,
        *,
        timeout: Timeout = None,
    ) -> Any:
        """Perform a POST request with a JSON body."""
        ar = APIRequest("POST", endpoint, payload=payload, query=query)
        return self.do(ar, response_type, timeout=timeout)

    def put(
        self,
        endpoint: str,
        payload: Any = None,
        response_type: Any = None,
        query: dict[str, str] | None = None,
        *,
        timeout: Timeout = None,
    ) -> Any:
        """Perform a PUT request with a JSON body."""
        ar = APIRequest("PUT", endpoint, payload=payload, query=query)
        return self.do(ar, response_type, timeout=timeout)

    def patch(
        self,
        endpoint: str,
        payload: Any = None,
        response_type: Any = None,
        query: dict[str, str] | None = None,
        *,
        timeout: Timeout = None,
    ) -> Any:
        """Perform a PATCH request with a JSON body."""
        ar = APIRequest("PATCH", endpoint, payload=payload, query=query)
        return self.do(ar, response_type, timeout=timeout)

    def delete(
        self,
        endpoint: str,
        query: dict[str, str] | None = None,
        *,
        timeout: Timeout = None,
    ) -> None:
        """Perform a DELETE request; any response body is ignored."""
        self.do(APIRequest("DELETE", endpoint, query=query), timeout=timeout)

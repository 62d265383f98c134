"""
JSON-RPC transport for a Nimiq node.

One ``httpx.Client`` per ``RPCClient`` gives connection pooling across calls
and threads.  Each call is a single POST; nothing is retried.  Request IDs
come from a per-client counter, so IDs are unique and increasing even when
one client is shared between threads.
"""

from __future__ import annotations

import base64
import itertools
import logging
import threading
from typing import Any, Mapping, Optional

import httpx

from .config import (
    DEFAULT_RPC_URL,
    DEFAULT_TIMEOUT,
    KEEPALIVE_EXPIRY,
    MAX_CONNECTIONS,
    POOL_TIMEOUT,
    ClientConfig,
)
from .rpc.envelope import Request, Response, check_response, parse_response
from .rpc.errors import (
    EmptyResponseError,
    MalformedResponseError,
    NotAuthenticatedError,
    TransportError,
    UnauthorizedError,
)
from .rpc.schemas import SchemaRegistry

logger = logging.getLogger(__name__)


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class RPCClient:
    """Low-level JSON-RPC client: envelopes, HTTP and error mapping."""

    def __init__(
        self,
        address: str = DEFAULT_RPC_URL,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        registry: Optional[SchemaRegistry] = None,
    ) -> None:
        """
        Args:
            address: URL of the node's RPC endpoint
            headers: Additional headers sent with every request
            timeout: Connect/read/write timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
            registry: Schema registry used to validate response envelopes
        """
        self.address = address
        self.headers: dict[str, str] = dict(headers or {})
        self._registry = registry or SchemaRegistry.default()
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()
        self._http = httpx.Client(
            timeout=httpx.Timeout(timeout, pool=POOL_TIMEOUT),
            limits=httpx.Limits(
                max_connections=MAX_CONNECTIONS,
                max_keepalive_connections=MAX_CONNECTIONS,
                keepalive_expiry=KEEPALIVE_EXPIRY,
            ),
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "RPCClient":
        client = cls(
            address=config.address,
            headers=config.headers,
            timeout=config.timeout,
            **kwargs,
        )
        if config.has_credentials:
            client.authenticate(config.username, config.password)
        return client

    def authenticate(self, username: str, password: str) -> None:
        """Send HTTP Basic credentials with every subsequent request."""
        self.headers["Authorization"] = basic_auth_header(username, password)

    def next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    def new_request(self, method: str, params: Any = None) -> Request:
        return Request(method=method, params=params, id=self.next_id())

    def raw_call(self, method: str, params: Any = None) -> Response:
        """
        Send a JSON-RPC request and return the checked response.

        Every typed call goes through here; it is public so that node
        methods without a typed wrapper can still be reached.

        Args:
            method: Node method name (e.g., "blockNumber")
            params: Positional parameters, or None for no params

        Returns:
            Response whose ID matches the request and which carries no error

        Raises:
            TransportError: Network failure, or a non-2xx status without an envelope
            NotAuthenticatedError: HTTP 401
            UnauthorizedError: HTTP 403
            EmptyResponseError: Empty response body
            MalformedResponseError: Body is not a JSON-RPC envelope
            IDMismatchError: Response ID differs from the request ID
            JSONRPCError: The node returned an error object
        """
        request = self.new_request(method, params)
        body = request.to_json()
        headers = {"Content-Type": "application/json", **self.headers}

        logger.debug("rpc request id=%s method=%s", request.id, method)
        try:
            http_response = self._http.post(self.address, content=body, headers=headers)
        except httpx.HTTPError as exc:
            logger.debug("rpc request id=%s failed: %s", request.id, exc)
            raise TransportError(f"HTTP request to {self.address} failed: {exc}") from exc

        status = http_response.status_code
        if status == 401:
            raise NotAuthenticatedError()
        if status == 403:
            raise UnauthorizedError()

        data = http_response.content
        if not data.strip():
            raise EmptyResponseError()

        try:
            response = parse_response(data, registry=self._registry)
        except MalformedResponseError as exc:
            if not http_response.is_success:
                raise TransportError(f"HTTP {status} from {self.address}") from exc
            raise

        logger.debug("rpc response id=%s method=%s", response.id, method)
        check_response(request, response)
        return response

    def call(self, method: str, params: Any = None) -> Any:
        """Send a request and return its raw ``result`` member."""
        return self.raw_call(method, params).result

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

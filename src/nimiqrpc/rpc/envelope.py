"""
JSON-RPC 2.0 envelope codec.

Builds request envelopes, parses response envelopes, and turns the error
object of a response into the matching exception.  The ``result`` member
is handed back undecoded so each call site can pick its own record type.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from .errors import (
    ErrorKind,
    IDMismatchError,
    MalformedResponseError,
    error_for_code,
    error_kind,
)
from .schemas import REQUEST_SCHEMA, RESPONSE_SCHEMA, SchemaRegistry, SchemaValidationError

JSONRPC_VERSION = "2.0"


@dataclass(frozen=True)
class Request:
    method: str
    params: Any = None
    id: int | str = 0
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        if self.params is not None:
            payload["params"] = self.params
        payload["id"] = self.id
        return payload

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_dict(cls, payload: dict[str, Any], registry: SchemaRegistry | None = None) -> "Request":
        registry = registry or SchemaRegistry.default()
        registry.validate_instance(payload, REQUEST_SCHEMA)
        return cls(
            method=payload["method"],
            params=payload.get("params"),
            id=payload["id"],
            jsonrpc=payload["jsonrpc"],
        )

    @classmethod
    def from_json(cls, data: bytes | str, registry: SchemaRegistry | None = None) -> "Request":
        try:
            payload = json.loads(data)
        except ValueError as exc:
            raise SchemaValidationError(f"Request is not valid JSON: {exc}") from exc
        return cls.from_dict(payload, registry=registry)


@dataclass(frozen=True)
class RPCErrorObject:
    code: int = 0
    message: str = ""
    data: Any = None

    @property
    def kind(self) -> ErrorKind:
        return error_kind(self.code)

    def raise_for_kind(self) -> None:
        """Raise the exception mapped from ``code``; no-op when there is no error."""
        exc = error_for_code(self.code, self.message, self.data)
        if exc is not None:
            raise exc

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "RPCErrorObject":
        return cls(
            code=payload.get("code", 0),
            message=payload.get("message", ""),
            data=payload.get("data"),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


@dataclass(frozen=True)
class Response:
    id: int | str | None
    result: Any = None
    error: Optional[RPCErrorObject] = None
    jsonrpc: str = JSONRPC_VERSION

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Response":
        error = payload.get("error")
        return cls(
            id=payload.get("id"),
            result=payload.get("result"),
            error=RPCErrorObject.from_dict(error) if error is not None else None,
            jsonrpc=payload.get("jsonrpc", JSONRPC_VERSION),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.error is not None:
            payload["error"] = self.error.to_dict()
        else:
            payload["result"] = self.result
        payload["id"] = self.id
        return payload


def parse_response(data: bytes | str, registry: SchemaRegistry | None = None) -> Response:
    """
    Parse raw response bytes into a ``Response``.

    Raises:
        MalformedResponseError: If the body is not JSON or not a response envelope
    """
    try:
        payload = json.loads(data)
    except ValueError as exc:
        raise MalformedResponseError(f"Response is not valid JSON: {exc}") from exc

    registry = registry or SchemaRegistry.default()
    try:
        registry.validate_instance(payload, RESPONSE_SCHEMA)
    except SchemaValidationError as exc:
        raise MalformedResponseError(
            "Response is not a JSON-RPC envelope.", errors=exc.errors
        ) from exc

    return Response.from_dict(payload)


def check_response(request: Request, response: Response) -> Any:
    """
    Validate a response against the request that produced it.

    The ID is checked before anything else; a mismatch means the exchange
    can't be trusted, whatever the response carries.

    Returns:
        The raw ``result`` member

    Raises:
        IDMismatchError: If the response ID differs from the request ID
        JSONRPCError: If the response carries a non-zero error code
    """
    if response.id != request.id or isinstance(response.id, bool):
        raise IDMismatchError(request.id, response.id)
    if response.error is not None:
        response.error.raise_for_kind()
    return response.result


__all__ = [
    "JSONRPC_VERSION",
    "RPCErrorObject",
    "Request",
    "Response",
    "check_response",
    "parse_response",
]

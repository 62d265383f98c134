"""
Error taxonomy for the Nimiq JSON-RPC client.

Every failure a call can produce is one of these exceptions.  Transport
and envelope problems have their own classes; errors reported by the node
inside the JSON-RPC error object are ``JSONRPCError`` subclasses selected
by ``ErrorKind``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    PARSE_ERROR = "parse_error"
    INVALID_REQUEST = "invalid_request"
    METHOD_NOT_FOUND = "method_not_found"
    INVALID_PARAMS = "invalid_params"
    INTERNAL_ERROR = "internal_error"
    SERVER_ERROR = "server_error"
    APPLICATION_ERROR = "application_error"
    NO_ERROR = "no_error"


RESERVED_CODES = {
    -32700: ErrorKind.PARSE_ERROR,
    -32600: ErrorKind.INVALID_REQUEST,
    -32601: ErrorKind.METHOD_NOT_FOUND,
    -32602: ErrorKind.INVALID_PARAMS,
    -32603: ErrorKind.INTERNAL_ERROR,
}

SERVER_ERROR_MIN = -32099
SERVER_ERROR_MAX = -32000


def error_kind(code: int | None) -> ErrorKind:
    """Map a JSON-RPC error code to its ``ErrorKind``.

    Codes outside the reserved ranges that are still non-zero are
    treated as application errors so that a failure is never read as
    success.
    """
    if not code:
        return ErrorKind.NO_ERROR
    if code in RESERVED_CODES:
        return RESERVED_CODES[code]
    if SERVER_ERROR_MIN <= code <= SERVER_ERROR_MAX:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.APPLICATION_ERROR


class NimiqRPCError(RuntimeError):
    exit_code: int = 1


class TransportError(NimiqRPCError):
    exit_code = 2


class EmptyResponseError(NimiqRPCError):
    exit_code = 2

    def __init__(self, message: str = "the HTTP response body was empty") -> None:
        super().__init__(message)


class NotAuthenticatedError(NimiqRPCError):
    exit_code = 3

    def __init__(self, message: str = "not authenticated") -> None:
        super().__init__(message)


class UnauthorizedError(NimiqRPCError):
    exit_code = 3

    def __init__(self, message: str = "unauthorized") -> None:
        super().__init__(message)


class MalformedResponseError(NimiqRPCError):
    exit_code = 4

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class IDMismatchError(NimiqRPCError):
    exit_code = 4

    def __init__(self, request_id: int | str, response_id: Any) -> None:
        super().__init__(
            "JSON-RPC: the request ID and the response ID didn't match "
            f"(sent {request_id!r}, got {response_id!r})"
        )
        self.request_id = request_id
        self.response_id = response_id


class ResultUnexpectedError(NimiqRPCError):
    exit_code = 5

    def __init__(self, detail: str) -> None:
        super().__init__(f"unexpected result: {detail}")
        self.detail = detail


class JSONRPCError(NimiqRPCError):
    """An error object returned by the node."""

    exit_code = 6
    kind: ErrorKind = ErrorKind.APPLICATION_ERROR
    description: str = "JSON-RPC: error"

    def __init__(self, code: int, message: str = "", data: Any = None) -> None:
        super().__init__(self._format(code, message))
        self.code = code
        self.message = message
        self.data = data

    def _format(self, code: int, message: str) -> str:
        if message:
            return f"{self.description} ({code}): {message}"
        return f"{self.description} ({code})"


class ParseError(JSONRPCError):
    kind = ErrorKind.PARSE_ERROR
    description = (
        "JSON-RPC: Invalid JSON was received by the server. "
        "An error occurred on the server while parsing the JSON text"
    )


class InvalidRequestError(JSONRPCError):
    kind = ErrorKind.INVALID_REQUEST
    description = "JSON-RPC: The JSON sent is not a valid Request object"


class MethodNotFoundError(JSONRPCError):
    kind = ErrorKind.METHOD_NOT_FOUND
    description = "JSON-RPC: The method does not exist / is not available"


class InvalidParamsError(JSONRPCError):
    kind = ErrorKind.INVALID_PARAMS
    description = "JSON-RPC: Invalid method parameter(s)"


class InternalError(JSONRPCError):
    kind = ErrorKind.INTERNAL_ERROR
    description = "JSON-RPC: Internal JSON-RPC error"


class ServerError(JSONRPCError):
    kind = ErrorKind.SERVER_ERROR
    description = "JSON-RPC: Server error"


class ApplicationError(JSONRPCError):
    kind = ErrorKind.APPLICATION_ERROR
    description = "Nimiq RPC error"

    def _format(self, code: int, message: str) -> str:
        return f"{self.description}: {message}" if message else f"{self.description} ({code})"


ERROR_CLASSES: dict[ErrorKind, type[JSONRPCError]] = {
    cls.kind: cls
    for cls in (
        ParseError,
        InvalidRequestError,
        MethodNotFoundError,
        InvalidParamsError,
        InternalError,
        ServerError,
        ApplicationError,
    )
}


def error_for_code(code: int, message: str = "", data: Any = None) -> JSONRPCError | None:
    """Build the exception for an error code, or ``None`` for no error."""
    kind = error_kind(code)
    if kind is ErrorKind.NO_ERROR:
        return None
    return ERROR_CLASSES[kind](code, message, data)


__all__ = [
    "ApplicationError",
    "EmptyResponseError",
    "ErrorKind",
    "IDMismatchError",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "JSONRPCError",
    "MalformedResponseError",
    "MethodNotFoundError",
    "NimiqRPCError",
    "NotAuthenticatedError",
    "ParseError",
    "ResultUnexpectedError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "error_for_code",
    "error_kind",
]

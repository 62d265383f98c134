"""
RPC - JSON-RPC 2.0 envelope layer for the Nimiq client.

Request/response records, envelope validation against bundled JSON
schemas, and the mapping from JSON-RPC error codes to exceptions.
"""

from .envelope import (
    JSONRPC_VERSION,
    RPCErrorObject,
    Request,
    Response,
    check_response,
    parse_response,
)
from .errors import (
    ApplicationError,
    EmptyResponseError,
    ErrorKind,
    IDMismatchError,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    JSONRPCError,
    MalformedResponseError,
    MethodNotFoundError,
    NimiqRPCError,
    NotAuthenticatedError,
    ParseError,
    ResultUnexpectedError,
    ServerError,
    TransportError,
    UnauthorizedError,
    error_for_code,
    error_kind,
)

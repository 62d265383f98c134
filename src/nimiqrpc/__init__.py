__all__ = [
    # Clients
    "NimiqClient",
    "RPCClient",
    "ClientConfig",
    # Envelope
    "Request",
    "Response",
    "RPCErrorObject",
    "ErrorKind",
    "error_kind",
    # Errors
    "NimiqRPCError",
    "TransportError",
    "EmptyResponseError",
    "NotAuthenticatedError",
    "UnauthorizedError",
    "MalformedResponseError",
    "IDMismatchError",
    "ResultUnexpectedError",
    "JSONRPCError",
    "ParseError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalError",
    "ServerError",
    "ApplicationError",
    # Records
    "Account",
    "AccountType",
    "AddressObject",
    "Block",
    "BlockTemplate",
    "LogLevel",
    "Mempool",
    "OutgoingTransaction",
    "Peer",
    "SyncStatus",
    "Transaction",
    "TransactionHashes",
    "TransactionObjects",
    "TransactionReceipt",
    "Wallet",
    "Work",
    # Units
    "LUNA_PER_NIM",
    "luna_to_nim",
    "nim_to_luna",
    "address_to_hex",
]

from .api import NimiqClient
from .client import RPCClient
from .config import ClientConfig
from .rpc.envelope import RPCErrorObject, Request, Response
from .rpc.errors import (
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
    error_kind,
)
from .types import (
    Account,
    AccountType,
    AddressObject,
    Block,
    BlockTemplate,
    LogLevel,
    Mempool,
    OutgoingTransaction,
    Peer,
    SyncStatus,
    Transaction,
    TransactionHashes,
    TransactionObjects,
    TransactionReceipt,
    Wallet,
    Work,
)
from .utils import LUNA_PER_NIM, address_to_hex, luna_to_nim, nim_to_luna

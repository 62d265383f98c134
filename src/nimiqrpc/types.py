"""
Domain records returned by the Nimiq node.

Each record mirrors one JSON object of the node's RPC schema.  Records are
frozen dataclasses built with ``from_dict`` and turned back into wire form
with ``to_dict``.  Fields the node leaves out keep their zero value; a field
that is present with the wrong JSON type raises ``ResultUnexpectedError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, IntEnum
from typing import Any, Callable, Optional, Union

from .rpc.errors import ResultUnexpectedError

Decoder = Callable[[str, Any], Any]


class AccountType(IntEnum):
    BASIC = 0
    VESTING = 1
    HTLC = 2


class LogLevel(str, Enum):
    TRACE = "trace"
    VERBOSE = "verbose"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    ASSERT = "assert"


# ============ Field decoders ============


def _type_error(key: str, expected: str, value: Any) -> ResultUnexpectedError:
    return ResultUnexpectedError(f"{key}: expected {expected}, got {type(value).__name__}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _type_error(key, "string", value)
    return value


def _int(key: str, value: Any) -> int:
    if not _is_int(value):
        raise _type_error(key, "integer", value)
    return value


def _str_tuple(key: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise _type_error(key, "array", value)
    return tuple(_str(f"{key}[{i}]", item) for i, item in enumerate(value))


def _int_tuple(key: str, value: Any) -> tuple[int, ...]:
    if not isinstance(value, list):
        raise _type_error(key, "array", value)
    return tuple(_int(f"{key}[{i}]", item) for i, item in enumerate(value))


def _account_type(key: str, value: Any) -> AccountType:
    try:
        return AccountType(_int(key, value))
    except ValueError as exc:
        raise ResultUnexpectedError(f"{key}: unknown account type {value}") from exc


def _record(record_cls: type["_Record"]) -> Decoder:
    def decode(key: str, value: Any) -> "_Record":
        return record_cls.from_dict(require_object(value, key))

    return decode


_ZERO = {_str: "", _int: 0, _str_tuple: (), _int_tuple: ()}


def wire(key: str, decode: Decoder = _str, default: Any = None, **kwargs: Any) -> Any:
    """Declare a dataclass field stored under ``key`` on the wire."""
    if default is None and decode in _ZERO:
        default = _ZERO[decode]
    return field(default=default, metadata={"wire": key, "decode": decode}, **kwargs)


def require_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _type_error(what, "object", value)
    return value


def require_list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise _type_error(what, "array", value)
    return value


# ============ Base record ============


class _Record:
    @classmethod
    def _decode_fields(cls, payload: Any) -> dict[str, Any]:
        payload = require_object(payload, cls.__name__)
        values: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            key = f.metadata.get("wire")
            if key is None:
                continue
            raw = payload.get(key)
            if raw is None:
                continue
            values[f.name] = f.metadata["decode"](key, raw)
        return values

    @classmethod
    def from_dict(cls, payload: Any) -> Any:
        return cls(**cls._decode_fields(payload))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            key = f.metadata.get("wire")
            if key is None:
                continue
            out[key] = _to_wire(getattr(self, f.name))
        return out


def _to_wire(value: Any) -> Any:
    if isinstance(value, _Record):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_to_wire(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


# ============ Accounts ============


@dataclass(frozen=True)
class Account(_Record):
    id: str = wire("id")
    address: str = wire("address")
    balance: int = wire("balance", _int)
    type: AccountType = wire("type", _account_type, default=AccountType.BASIC)

    # Vesting contracts (type = 1)
    owner: str = wire("owner")
    owner_address: str = wire("ownerAddress")
    vesting_start: int = wire("vestingStart", _int)
    vesting_step_blocks: int = wire("vestingStepBlocks", _int)
    vesting_step_amount: int = wire("vestingStepAmount", _int)
    vesting_total_amount: int = wire("vestingTotalAmount", _int)

    # Hashed time-locked contracts (type = 2)
    sender: str = wire("sender")
    sender_address: str = wire("senderAddress")
    recipient: str = wire("recipient")
    recipient_address: str = wire("recipientAddress")
    hash_root: str = wire("hashRoot")
    hash_count: int = wire("hashCount", _int)
    timeout: int = wire("timeout", _int)
    total_amount: int = wire("totalAmount", _int)


@dataclass(frozen=True)
class AddressObject(_Record):
    id: str = wire("id")
    address: str = wire("address")


@dataclass(frozen=True)
class Wallet(_Record):
    id: str = wire("id")
    address: str = wire("address")
    public_key: str = wire("publicKey")
    private_key: str = wire("privateKey", repr=False)


# ============ Transactions ============


@dataclass(frozen=True)
class Transaction(_Record):
    hash: str = wire("hash")
    block_hash: str = wire("blockHash")
    block_number: int = wire("blockNumber", _int)
    timestamp: int = wire("timestamp", _int)
    confirmations: int = wire("confirmations", _int)
    transaction_index: int = wire("transactionIndex", _int)
    from_: str = wire("from")
    from_address: str = wire("fromAddress")
    to: str = wire("to")
    to_address: str = wire("toAddress")
    value: int = wire("value", _int)
    fee: int = wire("fee", _int)
    data: str = wire("data")
    flags: int = wire("flags", _int)


@dataclass(frozen=True)
class TransactionReceipt(_Record):
    transaction_hash: str = wire("transactionHash")
    transaction_index: int = wire("transactionIndex", _int)
    block_hash: str = wire("blockHash")
    block_number: int = wire("blockNumber", _int)
    confirmations: int = wire("confirmations", _int)
    timestamp: int = wire("timestamp", _int)


@dataclass(frozen=True)
class OutgoingTransaction(_Record):
    """A transaction to be created or sent by the node.

    ``from_type``, ``to_type`` and ``data`` are left off the wire when unset
    so the node applies its defaults (BASIC accounts, no data).
    """

    from_: str = wire("from")
    to: str = wire("to")
    value: int = wire("value", _int)
    fee: int = wire("fee", _int)
    from_type: AccountType = wire("fromType", _account_type, default=AccountType.BASIC)
    to_type: AccountType = wire("toType", _account_type, default=AccountType.BASIC)
    data: str = wire("data")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        for key in ("fromType", "toType", "data"):
            if not payload[key]:
                del payload[key]
        return payload


# ============ Blocks ============


@dataclass(frozen=True)
class TransactionHashes:
    hashes: tuple[str, ...] = ()

    def to_list(self) -> list[str]:
        return list(self.hashes)


@dataclass(frozen=True)
class TransactionObjects:
    transactions: tuple[Transaction, ...] = ()

    def to_list(self) -> list[dict[str, Any]]:
        return [tx.to_dict() for tx in self.transactions]


BlockTransactions = Union[TransactionHashes, TransactionObjects]


def decode_block_transactions(raw: Any, full_transactions: bool) -> BlockTransactions:
    """
    Decode the raw ``transactions`` member of a block.

    The node sends either transaction hashes or full transaction objects,
    depending on the ``fullTransactions`` flag of the request; the same flag
    picks the shape here.
    """
    items = require_list(raw if raw is not None else [], "transactions")
    if full_transactions:
        return TransactionObjects(
            tuple(
                Transaction.from_dict(require_object(item, f"transactions[{i}]"))
                for i, item in enumerate(items)
            )
        )
    return TransactionHashes(_str_tuple("transactions", items))


@dataclass(frozen=True)
class Block(_Record):
    number: int = wire("number", _int)
    hash: str = wire("hash")
    pow: str = wire("pow")
    parent_hash: str = wire("parentHash")
    nonce: int = wire("nonce", _int)
    body_hash: str = wire("bodyHash")
    accounts_hash: str = wire("accountsHash")
    miner: str = wire("miner")
    miner_address: str = wire("minerAddress")
    difficulty: str = wire("difficulty")
    extra_data: str = wire("extraData")
    size: int = wire("size", _int)
    timestamp: int = wire("timestamp", _int)
    transactions: BlockTransactions = field(default_factory=TransactionHashes)

    @classmethod
    def from_dict(cls, payload: Any, full_transactions: bool = False) -> "Block":
        values = cls._decode_fields(payload)
        values["transactions"] = decode_block_transactions(
            payload.get("transactions"), full_transactions
        )
        return cls(**values)

    @classmethod
    def from_lookup(cls, payload: Any, full_transactions: bool = False) -> Optional["Block"]:
        """Like ``from_dict``, but None for a block with an empty hash.

        The hash is checked before ``transactions`` is decoded, so an
        unknown block never fails on its transaction list.
        """
        values = cls._decode_fields(payload)
        if not values.get("hash"):
            return None
        values["transactions"] = decode_block_transactions(
            payload.get("transactions"), full_transactions
        )
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["transactions"] = self.transactions.to_list()
        return payload

    @property
    def transaction_hashes(self) -> Optional[tuple[str, ...]]:
        if isinstance(self.transactions, TransactionHashes):
            return self.transactions.hashes
        return None

    @property
    def transaction_objects(self) -> Optional[tuple[Transaction, ...]]:
        if isinstance(self.transactions, TransactionObjects):
            return self.transactions.transactions
        return None


@dataclass(frozen=True)
class BlockTemplateHeader(_Record):
    version: int = wire("version", _int)
    prev_hash: str = wire("prevHash")
    interlink_hash: str = wire("interlinkHash")
    accounts_hash: str = wire("accountsHash")
    n_bits: int = wire("nBits", _int)
    height: int = wire("height", _int)


@dataclass(frozen=True)
class BlockTemplateBody(_Record):
    hash: str = wire("hash")
    miner_addr: str = wire("minerAddr")
    extra_data: str = wire("extraData")
    transactions: tuple[str, ...] = wire("transactions", _str_tuple)
    pruned_accounts: tuple[str, ...] = wire("prunedAccounts", _str_tuple)
    merkle_hashes: tuple[str, ...] = wire("merkleHashes", _str_tuple)


@dataclass(frozen=True)
class BlockTemplate(_Record):
    header: BlockTemplateHeader = wire(
        "header", _record(BlockTemplateHeader), default=BlockTemplateHeader()
    )
    interlink: str = wire("interlink")
    body: BlockTemplateBody = wire("body", _record(BlockTemplateBody), default=BlockTemplateBody())
    target: int = wire("target", _int)


# ============ Mining & network ============


@dataclass(frozen=True)
class Work(_Record):
    data: str = wire("data")
    suffix: str = wire("suffix")
    target: int = wire("target", _int)
    algorithm: str = wire("algorithm")


@dataclass(frozen=True)
class SyncStatus(_Record):
    starting_block: int = wire("startingBlock", _int)
    current_block: int = wire("currentBlock", _int)
    highest_block: int = wire("highestBlock", _int)


@dataclass(frozen=True)
class Mempool(_Record):
    """Pending transactions grouped by fee per byte (in Luna).

    ``bucket_counts`` holds ``(bucket, transactions)`` pairs, highest
    bucket first.
    """

    total: int = wire("total", _int)
    buckets: tuple[int, ...] = wire("buckets", _int_tuple)
    bucket_counts: tuple[tuple[int, int], ...] = ()

    @classmethod
    def from_dict(cls, payload: Any) -> "Mempool":
        values = cls._decode_fields(payload)
        counts = {
            int(key): _int(key, value)
            for key, value in payload.items()
            if key.isascii() and key.isdigit() and value is not None
        }
        values["bucket_counts"] = tuple(sorted(counts.items(), reverse=True))
        return cls(**values)

    def count(self, bucket: int) -> int:
        """Transactions in ``bucket``, 0 if the node reported none."""
        return dict(self.bucket_counts).get(bucket, 0)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        for bucket, count in self.bucket_counts:
            payload[str(bucket)] = count
        return payload


@dataclass(frozen=True)
class Peer(_Record):
    id: str = wire("id")
    address: str = wire("address")
    address_state: int = wire("addressState", _int)
    connection_state: int = wire("connectionState", _int)
    version: int = wire("version", _int)
    time_offset: int = wire("timeOffset", _int)
    head_hash: str = wire("headHash")
    latency: int = wire("latency", _int)
    rx: int = wire("rx", _int)
    tx: int = wire("tx", _int)


__all__ = [
    "Account",
    "AccountType",
    "AddressObject",
    "Block",
    "BlockTemplate",
    "BlockTemplateBody",
    "BlockTemplateHeader",
    "BlockTransactions",
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
    "decode_block_transactions",
]

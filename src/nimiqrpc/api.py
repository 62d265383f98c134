"""
Typed Nimiq node API.

Every method wraps one node RPC method: it builds the positional params,
sends them through ``RPCClient.raw_call`` and decodes the result.  Lookups
by key (account, block, transaction, receipt, work, peer) return ``None``
when the node answers with an empty identifying field or ``null``, so a
missing object is never confused with an error or a zeroed record.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, Union

from .client import RPCClient
from .rpc.errors import ResultUnexpectedError
from .types import (
    Account,
    Block,
    BlockTemplate,
    LogLevel,
    Mempool,
    OutgoingTransaction,
    Peer,
    SyncStatus,
    Transaction,
    TransactionReceipt,
    Wallet,
    Work,
    require_list,
)

T = TypeVar("T")

# Default for getTransactionsByAddress, same as the node's
DEFAULT_MAX_ENTRIES = 1000


def _expect(method: str, result: Any, kind: type, what: str) -> Any:
    if kind is int:
        ok = isinstance(result, int) and not isinstance(result, bool)
    elif kind is float:
        ok = isinstance(result, (int, float)) and not isinstance(result, bool)
    else:
        ok = isinstance(result, kind)
    if not ok:
        raise ResultUnexpectedError(f"{method}: expected {what}, got {type(result).__name__}")
    return result


def _optional_args(*args: Optional[str]) -> list[str]:
    """Positional params up to the last one given."""
    params = list(args)
    while params and params[-1] is None:
        params.pop()
    if None in params:
        raise ValueError("extra_data requires miner_address")
    return params  # type: ignore[return-value]


def _lookup(result: Any, decode: Callable[[Any], T], found: Callable[[T], bool]) -> Optional[T]:
    if result is None:
        return None
    record = decode(result)
    return record if found(record) else None


class NimiqClient(RPCClient):
    """Client for a Nimiq node's JSON-RPC API."""

    # ============ Accounts ============

    def accounts(self) -> list[Account]:
        """Addresses owned by the node."""
        result = self.call("accounts")
        return [Account.from_dict(item) for item in require_list(result, "accounts")]

    def create_account(self) -> Wallet:
        """Create a new account and store its private key in the node's wallet."""
        return Wallet.from_dict(self.call("createAccount"))

    def get_account(self, address: str) -> Optional[Account]:
        """Details for the account of ``address``, or None if the node has none."""
        return _lookup(
            self.call("getAccount", [address]),
            Account.from_dict,
            lambda account: bool(account.id),
        )

    def get_balance(self, address: str) -> int:
        """Balance of ``address`` in Luna."""
        return _expect("getBalance", self.call("getBalance", [address]), int, "integer")

    # ============ Blocks ============

    def block_number(self) -> int:
        """Height of the most recent block."""
        return _expect("blockNumber", self.call("blockNumber"), int, "integer")

    def get_block_by_hash(self, block_hash: str, full_transactions: bool = False) -> Optional[Block]:
        """
        Block with the given hash.

        Args:
            block_hash: Hex-encoded block hash
            full_transactions: Return full Transaction records instead of hashes

        Returns:
            Block, or None if the node doesn't know the block
        """
        return self._get_block("getBlockByHash", block_hash, full_transactions)

    def get_block_by_number(self, block_number: int, full_transactions: bool = False) -> Optional[Block]:
        """Block at the given height; see ``get_block_by_hash``."""
        return self._get_block("getBlockByNumber", block_number, full_transactions)

    def _get_block(
        self, method: str, key: Union[str, int], full_transactions: bool
    ) -> Optional[Block]:
        result = self.call(method, [key, full_transactions])
        if result is None:
            return None
        return Block.from_lookup(result, full_transactions=full_transactions)

    def get_block_transaction_count_by_hash(self, block_hash: str) -> int:
        result = self.call("getBlockTransactionCountByHash", [block_hash])
        return _expect("getBlockTransactionCountByHash", result, int, "integer")

    def get_block_transaction_count_by_number(self, block_number: int) -> int:
        result = self.call("getBlockTransactionCountByNumber", [block_number])
        return _expect("getBlockTransactionCountByNumber", result, int, "integer")

    # ============ Transactions ============

    def create_raw_transaction(self, transaction: OutgoingTransaction) -> str:
        """Create and sign a transaction without sending it.

        The hex result can later be passed to ``send_raw_transaction``
        without the risk of replaying it.
        """
        result = self.call("createRawTransaction", [transaction.to_dict()])
        return _expect("createRawTransaction", result, str, "string")

    def send_raw_transaction(self, signed_transaction: str) -> str:
        """Broadcast a signed transaction and return its hash."""
        result = self.call("sendRawTransaction", [signed_transaction])
        return _expect("sendRawTransaction", result, str, "string")

    def send_transaction(self, transaction: OutgoingTransaction) -> str:
        """Have the node sign and send a transaction; returns its hash."""
        result = self.call("sendTransaction", [transaction.to_dict()])
        return _expect("sendTransaction", result, str, "string")

    def get_transaction_by_hash(self, transaction_hash: str) -> Optional[Transaction]:
        return self._get_transaction("getTransactionByHash", [transaction_hash])

    def get_transaction_by_block_hash_and_index(
        self, block_hash: str, index: int
    ) -> Optional[Transaction]:
        return self._get_transaction("getTransactionByBlockHashAndIndex", [block_hash, index])

    def get_transaction_by_block_number_and_index(
        self, block_number: int, index: int
    ) -> Optional[Transaction]:
        return self._get_transaction(
            "getTransactionByBlockNumberAndIndex", [block_number, index]
        )

    def _get_transaction(self, method: str, params: list[Any]) -> Optional[Transaction]:
        return _lookup(
            self.call(method, params),
            Transaction.from_dict,
            lambda tx: bool(tx.hash),
        )

    def get_transaction_receipt(self, transaction_hash: str) -> Optional[TransactionReceipt]:
        return _lookup(
            self.call("getTransactionReceipt", [transaction_hash]),
            TransactionReceipt.from_dict,
            lambda receipt: bool(receipt.transaction_hash),
        )

    def get_transactions_by_address(
        self, address: str, max_entries: int = DEFAULT_MAX_ENTRIES
    ) -> list[Transaction]:
        """
        Latest transactions sent by or to ``address``.

        The node returns at most ``max_entries`` transactions but may return
        fewer even when more exist, so the length says nothing about the
        account's history.
        """
        result = self.call("getTransactionsByAddress", [address, max_entries])
        return [
            Transaction.from_dict(item)
            for item in require_list(result, "getTransactionsByAddress")
        ]

    # ============ Mining ============

    def get_block_template(
        self, miner_address: Optional[str] = None, extra_data: Optional[str] = None
    ) -> BlockTemplate:
        """Template for the next block, honoring pool instructions.

        ``miner_address`` and ``extra_data`` override the values the node was
        started with (or received from its pool).
        """
        result = self.call("getBlockTemplate", _optional_args(miner_address, extra_data))
        return BlockTemplate.from_dict(result)

    def get_work(
        self, miner_address: Optional[str] = None, extra_data: Optional[str] = None
    ) -> Optional[Work]:
        """Mining instructions for the next block, or None if there is no work."""
        return _lookup(
            self.call("getWork", _optional_args(miner_address, extra_data)),
            Work.from_dict,
            lambda work: bool(work.data),
        )

    def submit_block(self, full_block: str) -> None:
        """Submit a hex-encoded block (header, interlink and body).

        Work from ``get_work`` must have its suffix appended.
        """
        self.call("submitBlock", [full_block])

    def hashrate(self) -> float:
        return float(_expect("hashrate", self.call("hashrate"), float, "number"))

    def mining(self) -> bool:
        return _expect("mining", self.call("mining"), bool, "boolean")

    # ============ Node ============

    def consensus(self) -> str:
        """Consensus state, e.g. "established" or "syncing"."""
        return _expect("consensus", self.call("consensus"), str, "string")

    def syncing(self) -> Optional[SyncStatus]:
        """Sync progress while the node is syncing, None otherwise."""
        result = self.call("syncing")
        if result is False:
            return None
        if isinstance(result, dict):
            return SyncStatus.from_dict(result)
        raise ResultUnexpectedError(
            f"syncing: expected object or false, got {type(result).__name__}"
        )

    def mempool(self) -> Optional[Mempool]:
        """Pending transactions bucketed by fee per byte, or None when empty."""
        return _lookup(
            self.call("mempool"),
            Mempool.from_dict,
            lambda pool: pool.total > 0 or bool(pool.buckets),
        )

    def log(self, tag: str, level: Union[LogLevel, str]) -> bool:
        """Set the node's log level for ``tag`` ("*" for all tags)."""
        result = self.call("log", [tag, LogLevel(level).value])
        return _expect("log", result, bool, "boolean")

    # ============ Network ============

    def peer_count(self) -> int:
        return _expect("peerCount", self.call("peerCount"), int, "integer")

    def peer_list(self) -> list[Peer]:
        result = self.call("peerList")
        return [Peer.from_dict(item) for item in require_list(result, "peerList")]

    def peer_state(self, address: str) -> Optional[Peer]:
        """State of the peer at ``address``, or None if the node doesn't know it."""
        return _lookup(
            self.call("peerState", [address]),
            Peer.from_dict,
            lambda peer: bool(peer.id),
        )

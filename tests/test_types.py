"""Decoding and wire-form tests for the domain records."""

from __future__ import annotations

import pytest

from nimiqrpc.rpc.errors import ResultUnexpectedError
from nimiqrpc.types import (
    Account,
    AccountType,
    Block,
    BlockTemplate,
    Mempool,
    OutgoingTransaction,
    Peer,
    SyncStatus,
    Transaction,
    TransactionHashes,
    TransactionObjects,
    Wallet,
    decode_block_transactions,
)

VESTING_ACCOUNT = {
    "id": "fd34ab7265a0e48c454ccbf4c9c61dfdf68f9a22",
    "address": "NQ62 YLSA NUK5 L3J8 QHAC RFSC KHGV YPT8 Y6H2",
    "balance": 52500000000000,
    "type": 1,
    "owner": "fd34ab7265a0e48c454ccbf4c9c61dfdf68f9a22",
    "ownerAddress": "NQ62 YLSA NUK5 L3J8 QHAC RFSC KHGV YPT8 Y6H2",
    "vestingStart": 1,
    "vestingStepBlocks": 259200,
    "vestingStepAmount": 2625000000000,
    "vestingTotalAmount": 52500000000000,
}


class TestDefaults:
    """Absent optional fields decode to their zero value."""

    def test_empty_object(self) -> None:
        assert Transaction.from_dict({}) == Transaction()
        assert Transaction().hash == ""
        assert Transaction().value == 0

    def test_null_fields_are_absent(self) -> None:
        tx = Transaction.from_dict({"hash": "ab", "data": None, "blockNumber": None})
        assert tx.data == ""
        assert tx.block_number == 0

    def test_unknown_fields_ignored(self) -> None:
        status = SyncStatus.from_dict({"currentBlock": 5, "somethingNew": True})
        assert status == SyncStatus(current_block=5)

    def test_block_template_nested_defaults(self) -> None:
        template = BlockTemplate.from_dict({"target": 1})
        assert template.header.height == 0
        assert template.body.transactions == ()


class TestAccount:
    def test_vesting_account(self) -> None:
        account = Account.from_dict(VESTING_ACCOUNT)
        assert account.type is AccountType.VESTING
        assert account.vesting_step_blocks == 259200
        assert account.hash_root == ""

    def test_unknown_account_type(self) -> None:
        with pytest.raises(ResultUnexpectedError):
            Account.from_dict({**VESTING_ACCOUNT, "type": 9})

    def test_to_dict_uses_wire_names(self) -> None:
        payload = Account.from_dict(VESTING_ACCOUNT).to_dict()
        assert payload["ownerAddress"] == VESTING_ACCOUNT["ownerAddress"]
        assert payload["type"] == 1
        assert payload["totalAmount"] == 0


class TestWrongTypes:
    @pytest.mark.parametrize(
        "payload",
        [
            {"hash": 12},
            {"value": "100"},
            {"value": True},
            {"blockNumber": 1.5},
        ],
    )
    def test_field_type_mismatch(self, payload: dict) -> None:
        with pytest.raises(ResultUnexpectedError):
            Transaction.from_dict(payload)

    @pytest.mark.parametrize("payload", [None, [], "tx", 5])
    def test_not_an_object(self, payload) -> None:
        with pytest.raises(ResultUnexpectedError):
            Transaction.from_dict(payload)

    def test_string_list_items(self) -> None:
        with pytest.raises(ResultUnexpectedError):
            BlockTemplate.from_dict({"body": {"transactions": ["aa", 1]}})

    def test_nested_record_must_be_object(self) -> None:
        with pytest.raises(ResultUnexpectedError):
            BlockTemplate.from_dict({"header": "aa"})


class TestBlockTransactions:
    def test_hashes(self) -> None:
        decoded = decode_block_transactions(["aa", "bb"], full_transactions=False)
        assert decoded == TransactionHashes(("aa", "bb"))

    def test_objects(self) -> None:
        decoded = decode_block_transactions([{"hash": "aa"}], full_transactions=True)
        assert decoded == TransactionObjects((Transaction(hash="aa"),))

    def test_missing_is_empty(self) -> None:
        assert decode_block_transactions(None, False) == TransactionHashes()
        assert decode_block_transactions(None, True) == TransactionObjects()

    def test_objects_when_hashes_expected(self) -> None:
        with pytest.raises(ResultUnexpectedError):
            decode_block_transactions([{"hash": "aa"}], full_transactions=False)

    def test_not_a_list(self) -> None:
        with pytest.raises(ResultUnexpectedError):
            decode_block_transactions("aa", full_transactions=False)

    def test_only_one_side_populated(self) -> None:
        hashes = Block.from_dict({"hash": "h", "transactions": ["aa"]})
        objects = Block.from_dict({"hash": "h", "transactions": [{"hash": "aa"}]}, True)
        assert hashes.transaction_hashes == ("aa",) and hashes.transaction_objects is None
        assert objects.transaction_objects == (Transaction(hash="aa"),)
        assert objects.transaction_hashes is None

    def test_block_to_dict(self) -> None:
        block = Block.from_dict({"hash": "h", "transactions": [{"hash": "aa", "value": 5}]}, True)
        payload = block.to_dict()
        assert payload["hash"] == "h"
        assert payload["transactions"][0]["hash"] == "aa"
        assert payload["transactions"][0]["value"] == 5


class TestOutgoingTransaction:
    def test_defaults_left_off_the_wire(self) -> None:
        tx = OutgoingTransaction(from_="NQ01", to="NQ02", value=10, fee=1)
        assert tx.to_dict() == {"from": "NQ01", "to": "NQ02", "value": 10, "fee": 1}

    def test_explicit_types_and_data(self) -> None:
        tx = OutgoingTransaction(
            from_="NQ01",
            to="NQ02",
            value=10,
            fee=0,
            from_type=AccountType.VESTING,
            data="00ff",
        )
        assert tx.to_dict() == {
            "from": "NQ01",
            "to": "NQ02",
            "value": 10,
            "fee": 0,
            "fromType": 1,
            "data": "00ff",
        }


class TestMisc:
    def test_wallet_repr_hides_private_key(self) -> None:
        wallet = Wallet.from_dict({"id": "aa", "privateKey": "deadbeef"})
        assert "deadbeef" not in repr(wallet)
        assert wallet.to_dict()["privateKey"] == "deadbeef"

    def test_mempool_round_trip(self) -> None:
        payload = {"total": 4, "buckets": [10, 1], "10": 3, "1": 1}
        pool = Mempool.from_dict(payload)
        assert pool.bucket_counts == ((10, 3), (1, 1))
        assert pool.count(10) == 3
        assert pool.count(5) == 0
        assert pool.to_dict() == payload

    def test_mempool_is_immutable_and_hashable(self) -> None:
        pool = Mempool.from_dict({"total": 1, "buckets": [1], "1": 1})
        assert hash(pool) == hash(Mempool.from_dict({"total": 1, "buckets": [1], "1": 1}))
        with pytest.raises(TypeError):
            pool.bucket_counts[0] = (1, 99)  # type: ignore[index]

    def test_mempool_bucket_count_type(self) -> None:
        with pytest.raises(ResultUnexpectedError):
            Mempool.from_dict({"total": 1, "buckets": [1], "1": "one"})

    def test_mempool_ignores_non_ascii_digit_keys(self) -> None:
        pool = Mempool.from_dict({"total": 1, "buckets": [], "²": 1})
        assert pool.bucket_counts == ()

    def test_block_lookup_checks_hash_first(self) -> None:
        assert Block.from_lookup({"hash": "", "transactions": [{"hash": "aa"}]}) is None
        block = Block.from_lookup({"hash": "h", "transactions": ["aa"]})
        assert block is not None and block.transaction_hashes == ("aa",)

    def test_peer(self) -> None:
        peer = Peer.from_dict({"id": "abc", "addressState": 2, "rx": 10})
        assert (peer.id, peer.address_state, peer.rx, peer.tx) == ("abc", 2, 10, 0)

    def test_records_are_frozen(self) -> None:
        tx = Transaction(hash="aa")
        with pytest.raises(AttributeError):
            tx.hash = "bb"  # type: ignore[misc]

"""
Transaction commands - create, send and look up transactions.

Amounts are given in Luna (1 NIM = 100'000 Luna).
"""

from __future__ import annotations

from typing import Callable

import click

from ..types import AccountType, OutgoingTransaction
from ._common import echo_record, echo_records, rpc_session

_ACCOUNT_TYPES = click.Choice([t.name.lower() for t in AccountType])


def _outgoing_options(func: Callable) -> Callable:
    options = [
        click.option("--from", "sender", required=True, help="Sending address"),
        click.option("--to", "recipient", required=True, help="Recipient address"),
        click.option("--value", required=True, type=click.IntRange(min=1), help="Value in Luna"),
        click.option("--fee", default=0, show_default=True, type=click.IntRange(min=0), help="Fee in Luna"),
        click.option("--data", default="", help="Hex-encoded data or message"),
        click.option("--from-type", default="basic", type=_ACCOUNT_TYPES, help="Sender account type"),
        click.option("--to-type", default="basic", type=_ACCOUNT_TYPES, help="Recipient account type"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _outgoing(
    sender: str,
    recipient: str,
    value: int,
    fee: int,
    data: str,
    from_type: str,
    to_type: str,
) -> OutgoingTransaction:
    return OutgoingTransaction(
        from_=sender,
        to=recipient,
        value=value,
        fee=fee,
        data=data,
        from_type=AccountType[from_type.upper()],
        to_type=AccountType[to_type.upper()],
    )


@click.command("create-raw-transaction")
@_outgoing_options
def create_raw_transaction(**kwargs: object) -> None:
    """Create and sign a transaction without sending it."""
    transaction = _outgoing(**kwargs)  # type: ignore[arg-type]
    with rpc_session() as client:
        raw = client.create_raw_transaction(transaction)
    click.echo(f"Transaction in hex: {raw}")


@click.command("send-transaction")
@_outgoing_options
def send_transaction(**kwargs: object) -> None:
    """Have the node sign and send a transaction."""
    transaction = _outgoing(**kwargs)  # type: ignore[arg-type]
    with rpc_session() as client:
        tx_hash = client.send_transaction(transaction)
    click.secho("Transaction sent.", fg="green")
    click.echo(f"  TX: {tx_hash}")


@click.command("send-raw-transaction")
@click.argument("signed_transaction")
def send_raw_transaction(signed_transaction: str) -> None:
    """Broadcast a signed, hex-encoded transaction."""
    with rpc_session() as client:
        tx_hash = client.send_raw_transaction(signed_transaction)
    click.secho("Transaction sent.", fg="green")
    click.echo(f"  TX: {tx_hash}")


@click.command("get-transaction-by-hash")
@click.argument("transaction_hash")
def get_transaction_by_hash(transaction_hash: str) -> None:
    """Show the transaction TRANSACTION_HASH."""
    with rpc_session() as client:
        echo_record(client.get_transaction_by_hash(transaction_hash), "Transaction")


@click.command("get-transaction-by-block-hash-and-index")
@click.argument("block_hash")
@click.argument("index", type=click.IntRange(min=0))
def get_transaction_by_block_hash_and_index(block_hash: str, index: int) -> None:
    """Show transaction INDEX of block BLOCK_HASH."""
    with rpc_session() as client:
        transaction = client.get_transaction_by_block_hash_and_index(block_hash, index)
        echo_record(transaction, "Transaction")


@click.command("get-transaction-by-block-number-and-index")
@click.argument("number", type=click.IntRange(min=0))
@click.argument("index", type=click.IntRange(min=0))
def get_transaction_by_block_number_and_index(number: int, index: int) -> None:
    """Show transaction INDEX of the block at height NUMBER."""
    with rpc_session() as client:
        transaction = client.get_transaction_by_block_number_and_index(number, index)
        echo_record(transaction, "Transaction")


@click.command("get-transaction-receipt")
@click.argument("transaction_hash")
def get_transaction_receipt(transaction_hash: str) -> None:
    """Show the receipt of transaction TRANSACTION_HASH."""
    with rpc_session() as client:
        echo_record(client.get_transaction_receipt(transaction_hash), "Receipt")


@click.command("get-transactions-by-address")
@click.argument("address")
@click.option("--max-entries", default=1000, show_default=True, type=click.IntRange(min=1))
def get_transactions_by_address(address: str, max_entries: int) -> None:
    """List the latest transactions sent by or to ADDRESS."""
    with rpc_session() as client:
        echo_records(client.get_transactions_by_address(address, max_entries))

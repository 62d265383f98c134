"""
Block commands - block lookups and per-block transaction counts.
"""

from __future__ import annotations

import click

from ._common import echo_record, rpc_session

_full_transactions = click.option(
    "--full-transactions",
    is_flag=True,
    help="Include full transaction objects instead of hashes",
)


@click.command("block-number")
def block_number() -> None:
    """Show the height of the most recent block."""
    with rpc_session() as client:
        height = client.block_number()
    click.echo(f"Block number: {height}")


@click.command("get-block-by-hash")
@click.argument("block_hash")
@_full_transactions
def get_block_by_hash(block_hash: str, full_transactions: bool) -> None:
    """Show the block with hash BLOCK_HASH."""
    with rpc_session() as client:
        echo_record(client.get_block_by_hash(block_hash, full_transactions), "Block")


@click.command("get-block-by-number")
@click.argument("number", type=click.IntRange(min=0))
@_full_transactions
def get_block_by_number(number: int, full_transactions: bool) -> None:
    """Show the block at height NUMBER."""
    with rpc_session() as client:
        echo_record(client.get_block_by_number(number, full_transactions), "Block")


@click.command("get-block-transaction-count-by-hash")
@click.argument("block_hash")
def get_block_transaction_count_by_hash(block_hash: str) -> None:
    """Show the number of transactions in the block BLOCK_HASH."""
    with rpc_session() as client:
        count = client.get_block_transaction_count_by_hash(block_hash)
    click.echo(f"Transactions in block: {count}")


@click.command("get-block-transaction-count-by-number")
@click.argument("number", type=click.IntRange(min=0))
def get_block_transaction_count_by_number(number: int) -> None:
    """Show the number of transactions in the block at height NUMBER."""
    with rpc_session() as client:
        count = client.get_block_transaction_count_by_number(number)
    click.echo(f"Transactions in block: {count}")

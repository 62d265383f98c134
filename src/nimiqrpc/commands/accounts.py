"""
Account commands - wallet accounts and balances held by the node.
"""

from __future__ import annotations

import click

from ..utils import format_nim
from ._common import echo_record, echo_records, rpc_session


@click.command()
def accounts() -> None:
    """List the accounts owned by the node."""
    with rpc_session() as client:
        echo_records(client.accounts())


@click.command("create-account")
def create_account() -> None:
    """Create a new account in the node's wallet."""
    with rpc_session() as client:
        wallet = client.create_account()

    click.echo(f"  ID:          {wallet.id}")
    click.echo(f"  Address:     {wallet.address}")
    click.echo(f"  Public key:  {wallet.public_key}")
    click.echo(f"  Private key: {wallet.private_key}")
    click.secho("  Keep the private key secret.", fg="yellow")


@click.command("get-account")
@click.argument("address")
def get_account(address: str) -> None:
    """Show details for the account of ADDRESS."""
    with rpc_session() as client:
        echo_record(client.get_account(address), "Account")


@click.command("get-balance")
@click.argument("address")
def get_balance(address: str) -> None:
    """Show the balance of ADDRESS."""
    with rpc_session() as client:
        balance = client.get_balance(address)

    click.echo(f"  Balance (Luna): {balance}")
    click.echo(f"  Balance (NIM):  {format_nim(balance)}")

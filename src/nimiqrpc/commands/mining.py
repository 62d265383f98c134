"""
Mining commands - block templates, work instructions and mining status.
"""

from __future__ import annotations

from typing import Optional

import click

from ._common import echo_record, rpc_session

_miner_address = click.option(
    "--miner-address", default=None, help="Miner address overriding the node's"
)
_extra_data = click.option(
    "--extra-data", default=None, help="Hex-encoded extra data overriding the node's"
)


@click.command("get-block-template")
@_miner_address
@_extra_data
def get_block_template(miner_address: Optional[str], extra_data: Optional[str]) -> None:
    """Show a template to build the next block."""
    if extra_data is not None and miner_address is None:
        raise click.UsageError("--extra-data requires --miner-address")
    with rpc_session() as client:
        echo_record(client.get_block_template(miner_address, extra_data), "Block template")


@click.command("get-work")
@_miner_address
@_extra_data
def get_work(miner_address: Optional[str], extra_data: Optional[str]) -> None:
    """Show instructions to mine the next block."""
    if extra_data is not None and miner_address is None:
        raise click.UsageError("--extra-data requires --miner-address")
    with rpc_session() as client:
        echo_record(client.get_work(miner_address, extra_data), "Work")


@click.command("submit-block")
@click.argument("full_block")
def submit_block(full_block: str) -> None:
    """Submit a hex-encoded block (with the work suffix appended)."""
    with rpc_session() as client:
        client.submit_block(full_block)
    click.secho("Block submitted.", fg="green")


@click.command()
def hashrate() -> None:
    """Show the node's hashes per second."""
    with rpc_session() as client:
        rate = client.hashrate()
    click.echo(f"Hashrate: {rate:.2f} H/s")


@click.command()
def mining() -> None:
    """Show whether the node is mining."""
    with rpc_session() as client:
        active = client.mining()
    click.echo(f"Mining: {'yes' if active else 'no'}")

"""
Node commands - consensus, sync status, mempool, log levels and peers.
"""

from __future__ import annotations

import click

from ..types import LogLevel
from ._common import echo_record, echo_records, rpc_session


@click.command()
def consensus() -> None:
    """Show the node's consensus state."""
    with rpc_session() as client:
        state = client.consensus()
    click.echo(f"Consensus: {state}")


@click.command()
def syncing() -> None:
    """Show sync progress."""
    with rpc_session() as client:
        status = client.syncing()

    if status is None:
        click.echo("Syncing: no")
        return
    click.echo("Syncing: yes")
    click.echo(f"  Starting block: {status.starting_block}")
    click.echo(f"  Current block:  {status.current_block}")
    click.echo(f"  Highest block:  {status.highest_block}")


@click.command()
def mempool() -> None:
    """Show pending transactions per fee bucket."""
    with rpc_session() as client:
        pool = client.mempool()

    if pool is None:
        click.echo("Mempool is empty.")
        return
    click.echo(f"Pending transactions: {pool.total}")
    for bucket in pool.buckets:
        click.echo(f"  >= {bucket:>5} Luna/byte: {pool.count(bucket)}")


@click.command()
@click.argument("tag")
@click.argument("level", type=click.Choice([level.value for level in LogLevel]))
def log(tag: str, level: str) -> None:
    """Set the node's log LEVEL for TAG ("*" for all tags)."""
    with rpc_session() as client:
        ok = client.log(tag, level)
    if ok:
        click.secho(f"Log level for {tag} set to {level}.", fg="green")
    else:
        click.secho(f"Node refused log level {level} for {tag}.", fg="yellow")


@click.command("peer-count")
def peer_count() -> None:
    """Show the number of connected peers."""
    with rpc_session() as client:
        count = client.peer_count()
    click.echo(f"Peers: {count}")


@click.command("peer-list")
def peer_list() -> None:
    """List the peers known to the node."""
    with rpc_session() as client:
        echo_records(client.peer_list())


@click.command("peer-state")
@click.argument("address")
def peer_state(address: str) -> None:
    """Show the state of the peer at ADDRESS."""
    with rpc_session() as client:
        echo_record(client.peer_state(address), "Peer")

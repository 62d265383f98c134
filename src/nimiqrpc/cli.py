"""
Nimiq RPC CLI

Command-line interface for a Nimiq node's JSON-RPC API.

The node is selected with --rpc-url (or NIMIQ_RPC_URL); credentials come
from --username/--password, NIMIQ_RPC_USERNAME/NIMIQ_RPC_PASSWORD or
~/.nimiqrpc/.env.

Commands:
  accounts, create-account, get-account, get-balance
  block-number, get-block-by-hash, get-block-by-number,
  get-block-transaction-count-by-hash, get-block-transaction-count-by-number
  create-raw-transaction, send-transaction, send-raw-transaction,
  get-transaction-by-hash, get-transaction-by-block-hash-and-index,
  get-transaction-by-block-number-and-index, get-transaction-receipt,
  get-transactions-by-address
  get-block-template, get-work, submit-block, hashrate, mining
  consensus, syncing, mempool, log, peer-count, peer-list, peer-state
  info - Show client configuration
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .config import NIMIQRPC_ENV, ClientConfig


# ============ Constants ============

VERSION = "0.1.0"


# ============ Banner ============


def _print_banner() -> None:
    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("N I M I Q   R P C", fg="bright_white", bold=True)
        + click.style(f"  v{VERSION}", dim=True)
    )
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="nimiqrpc")
@click.option("--rpc-url", envvar="NIMIQ_RPC_URL", default=None, help="Node RPC URL")
@click.option("--username", envvar="NIMIQ_RPC_USERNAME", default=None, help="RPC username")
@click.option("--password", envvar="NIMIQ_RPC_PASSWORD", default=None, help="RPC password")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and responses")
@click.pass_context
def cli(
    ctx: click.Context,
    rpc_url: Optional[str],
    username: Optional[str],
    password: Optional[str],
    verbose: bool,
) -> None:
    """Nimiq RPC: query and drive a Nimiq node."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        base = ClientConfig.from_env()
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(1)

    ctx.obj = ClientConfig(
        address=rpc_url or base.address,
        username=username or base.username,
        password=password if password is not None else base.password,
        headers=base.headers,
        timeout=base.timeout,
    )

    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Commands ============

from .commands.accounts import accounts, create_account, get_account, get_balance
from .commands.blocks import (
    block_number,
    get_block_by_hash,
    get_block_by_number,
    get_block_transaction_count_by_hash,
    get_block_transaction_count_by_number,
)
from .commands.mining import get_block_template, get_work, hashrate, mining, submit_block
from .commands.node import consensus, log, mempool, peer_count, peer_list, peer_state, syncing
from .commands.transactions import (
    create_raw_transaction,
    get_transaction_by_block_hash_and_index,
    get_transaction_by_block_number_and_index,
    get_transaction_by_hash,
    get_transaction_receipt,
    get_transactions_by_address,
    send_raw_transaction,
    send_transaction,
)

for _command in (
    accounts,
    create_account,
    get_account,
    get_balance,
    block_number,
    get_block_by_hash,
    get_block_by_number,
    get_block_transaction_count_by_hash,
    get_block_transaction_count_by_number,
    create_raw_transaction,
    send_transaction,
    send_raw_transaction,
    get_transaction_by_hash,
    get_transaction_by_block_hash_and_index,
    get_transaction_by_block_number_and_index,
    get_transaction_receipt,
    get_transactions_by_address,
    get_block_template,
    get_work,
    submit_block,
    hashrate,
    mining,
    consensus,
    syncing,
    mempool,
    log,
    peer_count,
    peer_list,
    peer_state,
):
    cli.add_command(_command)


# ============ Info ============


@cli.command()
@click.pass_obj
def info(config: ClientConfig) -> None:
    """Show client configuration."""
    _print_banner()

    click.secho("  Configuration ──────────────────────────", fg="cyan")
    click.echo()
    click.echo(
        click.style("  RPC URL:     ", dim=True)
        + click.style(config.address, fg="bright_white")
    )
    if config.has_credentials:
        auth_text = click.style(f"basic ({config.username})", fg="green")
    else:
        auth_text = click.style("none", fg="yellow")
    click.echo(click.style("  Auth:        ", dim=True) + auth_text)
    click.echo(
        click.style("  Timeout:     ", dim=True)
        + click.style(f"{config.timeout:g}s", fg="bright_white")
    )
    env_state = "found" if NIMIQRPC_ENV.exists() else "not found"
    click.echo(click.style("  Env file:    ", dim=True) + f"{NIMIQRPC_ENV} ({env_state})")
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """Nimiq RPC CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: old Python or non-tty
    cli()


if __name__ == "__main__":
    main()

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from typing import Any, Iterator, Sequence

import click

from ..api import NimiqClient
from ..config import ClientConfig
from ..rpc.errors import NimiqRPCError


def make_client(config: ClientConfig) -> NimiqClient:
    return NimiqClient.from_config(config)


@contextmanager
def rpc_session() -> Iterator[NimiqClient]:
    """Open a client for the current command; RPC failures exit with their code."""
    ctx = click.get_current_context()
    config = ctx.find_object(ClientConfig) or ClientConfig()
    client = make_client(config)
    try:
        yield client
    except NimiqRPCError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)
    finally:
        client.close()


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def echo_record(record: Any, what: str) -> None:
    if record is None:
        click.secho(f"{what} not found.", fg="yellow")
        sys.exit(1)
    echo_json(record.to_dict())


def echo_records(records: Sequence[Any]) -> None:
    echo_json([record.to_dict() for record in records])

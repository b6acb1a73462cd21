from __future__ import annotations

from typing import NoReturn

import typer
from brig_client import AuthError, BrigClientError, ConfigurationError, ValidationError

from .. import console
from ..formatting import created_message, deleted_message, links_table, lookup_table
from ..http import make_client


def _fail(action: str, exc: BrigClientError) -> NoReturn:
    if isinstance(exc, AuthError):
        console.err(f"Unauthorized. Check your API token. ({exc})")
    elif isinstance(exc, (ConfigurationError, ValidationError)):
        console.err(str(exc))
    else:
        console.err(f"Failed to {action}: {exc}")
    raise typer.Exit(code=1)


def list_links(
        ctx: typer.Context,
        json_out: bool = typer.Option(False, "--json", "-j", help="Print the raw JSON response."),
):
    """List all links."""
    try:
        with make_client(ctx.obj.resolve()) as client:
            if json_out:
                raw = client.list_links_raw()
            else:
                links = client.list_links()
    except BrigClientError as e:
        _fail("list links", e)

    if json_out:
        typer.echo(raw)
        return

    if not links:
        console.info("No links found.")
        return
    console.print(links_table(links))


def get_link(
        ctx: typer.Context,
        short_id: str = typer.Argument(..., help="Short ID to look up."),
):
    """Check whether a short link exists without following it."""
    try:
        with make_client(ctx.obj.resolve()) as client:
            lookup = client.get_link(short_id)
    except BrigClientError as e:
        _fail("get link", e)

    console.print(lookup_table(lookup))


def add_link(
        ctx: typer.Context,
        short_id: str = typer.Argument(..., help="Short ID to use."),
        target_url: str = typer.Argument(..., help="Target URL to map to."),
):
    """Add a new short link."""
    try:
        with make_client(ctx.obj.resolve()) as client:
            link = client.create_link(short_id, target_url)
    except BrigClientError as e:
        _fail("create link", e)

    console.ok(created_message(link))


def delete_link(
        ctx: typer.Context,
        short_id: str = typer.Argument(..., help="Short ID to delete."),
):
    """Delete a short link."""
    try:
        with make_client(ctx.obj.resolve()) as client:
            deleted = client.delete_link(short_id)
    except BrigClientError as e:
        _fail("delete link", e)

    console.ok(deleted_message(deleted))

from __future__ import annotations

from typing import Mapping

from brig_client import LinkLookup, ShortLink
from rich.table import Table


def links_table(links: Mapping[str, str | None]) -> Table:
    table = Table(title="Links")
    table.add_column("Short ID", style="bold")
    table.add_column("Target URL")
    for short_id in sorted(links):
        table.add_row(short_id, links[short_id] or "-")
    return table


def lookup_table(lookup: LinkLookup) -> Table:
    table = Table()
    table.add_column("Short ID", style="bold")
    table.add_column("Request URL")
    table.add_column("HTTP Status")
    table.add_column("Message", style="green" if lookup.found else "red")
    table.add_column("Location")
    table.add_row(
        lookup.short_id,
        lookup.request_url,
        str(lookup.status_code),
        lookup.message,
        lookup.location or "-",
    )
    return table


def created_message(link: ShortLink) -> str:
    return f"Link created: {link.short_id} -> {link.target_url}"


def deleted_message(short_id: str) -> str:
    return f"Short ID '{short_id}' deleted."

from __future__ import annotations

import json
from dataclasses import dataclass

from .errors import DecodeError

FOUND_STATUSES = (200, 302)


@dataclass(frozen=True)
class ShortLink:
    short_id: str
    target_url: str


@dataclass(frozen=True)
class LinkLookup:
    short_id: str
    request_url: str
    status_code: int
    location: str | None = None

    @property
    def found(self) -> bool:
        return self.status_code in FOUND_STATUSES

    @property
    def message(self) -> str:
        return "Found" if self.found else "Not Found"


def parse_listing(text: str) -> dict[str, str | None]:
    """Decode the body of ``GET /api/list`` into a short ID -> target URL map.

    The service stores links in a key-value namespace and may report ``null``
    for a key removed while the listing was being built, so ``None`` targets
    are kept rather than rejected.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"invalid JSON in list response: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"list response is not a JSON object: {text[:200]}")

    links: dict[str, str | None] = {}
    for short_id, target in data.items():
        if target is not None and not isinstance(target, str):
            raise DecodeError(f"unexpected target for {short_id!r}: {target!r}")
        links[short_id] = target
    return links

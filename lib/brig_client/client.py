from __future__ import annotations

from urllib.parse import quote

import httpx

from .config_types import ClientConfig
from .errors import ValidationError
from .models import FOUND_STATUSES, LinkLookup, ShortLink, parse_listing
from .transport import Transport


class BrigClient:
    """Synchronous client for the brig URL-shortener API.

    Every method performs exactly one HTTP round trip. Configuration and
    argument checks run first, so a call that fails them never touches the
    network.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._t = Transport(cfg, transport=transport)

    def __enter__(self) -> "BrigClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._t.close()

    def _require(self, **values: str) -> None:
        self._t.ensure_configured()
        missing = [name for name, value in values.items() if not (value or "").strip()]
        if missing:
            raise ValidationError("missing " + " or ".join(missing))

    def list_links_raw(self) -> str:
        r = self._t.request("GET", "/api/list")
        return r.text

    def list_links(self) -> dict[str, str | None]:
        return parse_listing(self.list_links_raw())

    def get_link(self, short_id: str) -> LinkLookup:
        self._require(**{"short ID": short_id})
        # Namespaced IDs ("yt/video") stay as path segments.
        r = self._t.request("GET", f"/{quote(short_id, safe='/')}", expected=(*FOUND_STATUSES, 404))
        return LinkLookup(
            short_id=short_id,
            request_url=str(r.request.url),
            status_code=r.status_code,
            location=r.headers.get("Location"),
        )

    def create_link(self, short_id: str, target_url: str) -> ShortLink:
        self._require(**{"short ID": short_id, "target URL": target_url})
        body = {"short_id": short_id, "target_url": target_url}
        self._t.request("POST", "/api/create", json_body=body, expected=(201,))
        return ShortLink(short_id=short_id, target_url=target_url)

    def delete_link(self, short_id: str) -> str:
        self._require(**{"short ID": short_id})
        self._t.request("DELETE", f"/api/delete/{quote(short_id, safe='')}")
        return short_id

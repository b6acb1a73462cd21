from __future__ import annotations

import json
import logging
from typing import Any, Iterable

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, ConfigurationError, NetworkError

log = logging.getLogger(__name__)

USER_AGENT = "brig-client/0.1.0"


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {"User-Agent": USER_AGENT}
        if cfg.token:
            # The service compares the header verbatim; no "Bearer" scheme.
            headers["Authorization"] = cfg.token

        try:
            self._client = httpx.Client(
                base_url=(cfg.base_url or "").rstrip("/"),
                timeout=cfg.timeout_s,
                headers=headers,
                follow_redirects=False,
                transport=transport,
            )
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"invalid base URL {cfg.base_url!r}: {e}") from e

    def close(self) -> None:
        self._client.close()

    def ensure_configured(self) -> None:
        if not (self._cfg.token or "").strip():
            raise ConfigurationError("no API token set")
        if not (self._cfg.base_url or "").strip():
            raise ConfigurationError("no base URL set")

    def url_for(self, path: str) -> str:
        return f"{self._cfg.base_url.rstrip('/')}{path}"

    def request(
            self,
            method: str,
            path: str,
            *,
            json_body: Any | None = None,
            expected: Iterable[int] = (200,),
    ) -> httpx.Response:
        self.ensure_configured()
        content = None
        headers = {}
        if json_body is not None:
            content = json.dumps(json_body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = "application/json"

        try:
            r = self._client.request(method, path, content=content, headers=headers)
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {self.url_for(path)}: {e}") from e
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"invalid request URL {self.url_for(path)!r}: {e}") from e

        log.debug("%s %s -> %s", method, r.request.url, r.status_code)

        if r.status_code in tuple(expected):
            return r

        msg = f"{method} {path} failed with {r.status_code}"
        details = (r.text or "").strip()[:1000] or None
        if r.status_code in (401, 403):
            raise AuthError(r.status_code, msg, details)
        raise ApiError(r.status_code, msg, details)

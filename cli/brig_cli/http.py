from __future__ import annotations

from brig_client import BrigClient
from brig_client.config_types import ClientConfig

from .config import AppConfig


def make_client(cfg: AppConfig) -> BrigClient:
    return BrigClient(
        ClientConfig(
            base_url=cfg.base_url,
            token=cfg.api_token or None,
            timeout_s=cfg.timeout_s,
        )
    )

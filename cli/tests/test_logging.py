from __future__ import annotations

import logging

import httpx

from brig_cli.logging_ import CLIENT_LOGGER, setup_logging
from brig_client import BrigClient
from brig_client.config_types import ClientConfig


def test_verbose_enables_request_log(caplog) -> None:
    setup_logging(True)
    assert logging.getLogger(CLIENT_LOGGER).level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.INFO

    client = BrigClient(
        ClientConfig(base_url="http://brig.test", token="secret"),
        transport=httpx.MockTransport(lambda _: httpx.Response(200, json={})),
    )
    with caplog.at_level(logging.DEBUG, logger=CLIENT_LOGGER), client:
        client.list_links()

    assert "GET http://brig.test/api/list -> 200" in caplog.text


def test_quiet_by_default() -> None:
    setup_logging(False)
    assert logging.getLogger(CLIENT_LOGGER).level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING

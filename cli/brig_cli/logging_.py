from __future__ import annotations

import logging

CLIENT_LOGGER = "brig_client"
# httpx logs every request at INFO; these only speak up with --verbose.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool) -> None:
    """Route brig_client's request log to stderr; -v shows one line per request."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger(CLIENT_LOGGER).setLevel(level)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if verbose else logging.WARNING)

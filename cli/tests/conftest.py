from __future__ import annotations

import pytest

from brig_cli import console, config


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch) -> None:
    for name in (config.ENV_API_TOKEN, config.ENV_BASE_URL, config.ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(config.ENV_CONFIG, str(tmp_path / "missing.yaml"))
    # Tables must not wrap URLs inside the runner's 80-column default.
    monkeypatch.setattr(console.console, "width", 200)
    monkeypatch.setattr(console.err_console, "width", 200)

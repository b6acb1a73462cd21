from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Any, Mapping

import yaml
from brig_client import ConfigurationError
from platformdirs import user_config_dir

from . import console

APP_NAME = "brig"
CONFIG_FILENAME = "config.yaml"
BASE_URL_DEFAULT = "http://brig.gs"
TIMEOUT_DEFAULT = 15.0

ENV_PREFIX = "BRIG_"
ENV_API_TOKEN = f"{ENV_PREFIX}API_TOKEN"
ENV_BASE_URL = f"{ENV_PREFIX}BASE_URL"
ENV_TIMEOUT = f"{ENV_PREFIX}TIMEOUT"
ENV_CONFIG = f"{ENV_PREFIX}CONFIG"

_FILE_KEYS = {"api_token", "base_url", "timeout"}
_KV_LINE = re.compile(r"^\s*[A-Za-z_][A-Za-z0-9_]*\s*=")


@dataclass(frozen=True)
class AppConfig:
    api_token: str
    base_url: str
    timeout_s: float = TIMEOUT_DEFAULT
    config_file: str | None = None


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"
    return f"{scheme}{value}"


def _looks_like_key_values(text: str) -> bool:
    lines = [line for line in text.splitlines() if line.strip() and not line.strip().startswith("#")]
    return bool(lines) and all(_KV_LINE.match(line) for line in lines)


def _parse_key_values(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip('"').strip("'")
    return data


def parse_config_text(text: str) -> dict[str, str]:
    """Parse a config file body into the recognized, lower-cased keys.

    Accepts a YAML mapping (``api_token: ...``) or shell-style ``KEY=VALUE``
    lines (``API_TOKEN=...``). Unknown keys are dropped.
    """
    data: Any
    if _looks_like_key_values(text):
        data = _parse_key_values(text)
    else:
        # BaseLoader keeps every scalar a string, so tokens like 0123 or yes
        # reach the Authorization header unchanged.
        data = yaml.load(text, Loader=yaml.BaseLoader)
    if not isinstance(data, dict):
        return {}

    out: dict[str, str] = {}
    for key, value in data.items():
        k = str(key).strip().lower()
        if k in _FILE_KEYS and isinstance(value, str) and value.strip():
            out[k] = value.strip()
    return out


def read_config_file(path: str) -> dict[str, str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        return {}
    except OSError as e:
        console.warn(f"could not load config {path}: {e}")
        return {}

    try:
        return parse_config_text(text)
    except yaml.YAMLError as e:
        console.warn(f"could not load config {path}: {e}")
        return {}


def _parse_timeout(raw: str | float | None) -> float:
    if raw is None or raw == "":
        return TIMEOUT_DEFAULT
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"invalid timeout: {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"timeout must be positive, got {raw!r}")
    return value


def _pick(flag: Any, env: str | None, file_value: str | None, default: Any = None) -> Any:
    if flag is not None:
        return flag
    if env:
        return env
    if file_value is not None:
        return file_value
    return default


def resolve_config(
        *,
        config_file: str | None = None,
        api_token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Merge config file, environment and flags (in rising priority).

    A flag of ``None`` means "not given" and falls through to the next
    source; an explicit empty flag is kept and later rejected by the client.
    Empty environment variables are treated as unset.
    """
    env = os.environ if environ is None else environ

    path = config_file or env.get(ENV_CONFIG) or config_path()
    path = os.path.expanduser(path)
    file_values = read_config_file(path)

    token = _pick(api_token, env.get(ENV_API_TOKEN), file_values.get("api_token"), "")
    url = _pick(base_url, env.get(ENV_BASE_URL), file_values.get("base_url"), BASE_URL_DEFAULT)
    timeout_raw = _pick(timeout, env.get(ENV_TIMEOUT), file_values.get("timeout"))

    return AppConfig(
        api_token=str(token).strip(),
        base_url=normalize_base_url(url),
        timeout_s=_parse_timeout(timeout_raw),
        config_file=path,
    )


@dataclass(frozen=True)
class ConfigOverrides:
    """Global command-line options, resolved only when a command runs."""

    config_file: str | None = None
    api_token: str | None = None
    base_url: str | None = None
    timeout: float | None = None

    def resolve(self, environ: Mapping[str, str] | None = None) -> AppConfig:
        return resolve_config(
            config_file=self.config_file,
            api_token=self.api_token,
            base_url=self.base_url,
            timeout=self.timeout,
            environ=environ,
        )

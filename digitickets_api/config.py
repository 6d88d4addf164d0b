# config.py - environment driven client settings
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .api_client import DEFAULT_TIMEOUT
from .consts import DEFAULT_API_URL, ApiVersion
from .exceptions import ConfigurationError


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    value = raw.strip().lower()
    if value in ("0", "none", "off"):
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"DIGITICKETS_TIMEOUT must be a number of seconds, got {raw!r}")
    if timeout < 0:
        raise ConfigurationError(f"DIGITICKETS_TIMEOUT must not be negative, got {raw!r}")
    return timeout


@dataclass
class ClientSettings:
    api_url: str = DEFAULT_API_URL
    api_version: str = ApiVersion.V2
    api_key: Optional[str] = None
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientSettings":
        env = os.environ if environ is None else environ
        return cls(
            api_url=env.get("DIGITICKETS_API_URL") or DEFAULT_API_URL,
            # An explicitly empty version selects the unversioned root.
            api_version=env.get("DIGITICKETS_API_VERSION", ApiVersion.V2).strip(),
            api_key=env.get("DIGITICKETS_API_KEY") or None,
            timeout=_parse_timeout(env.get("DIGITICKETS_TIMEOUT")),
        )

"""Runtime configuration for the optional metadata service.

Values come from the process environment, after loading a ``.env`` file
with python-dotenv when one is present:

- ``SUNHEX_API_KEY``: bearer credential for the metadata endpoint
- ``SUNHEX_BASE_URL``: service root (default https://protocol.sunhex.com)
- ``SUNHEX_TIMEOUT``: request timeout in seconds (default 10)

Encoding and decoding fragments never reads configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .errors import ConfigError


@dataclass
class SunhexConfig:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_config(environ: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> SunhexConfig:
    if environ is None:
        if dotenv:
            load_dotenv()
        environ = os.environ
    raw_timeout = environ.get("SUNHEX_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"SUNHEX_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
        if timeout <= 0:
            raise ConfigError("SUNHEX_TIMEOUT must be positive")
    return SunhexConfig(
        api_key=environ.get("SUNHEX_API_KEY") or None,
        base_url=(environ.get("SUNHEX_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        timeout=timeout,
    )

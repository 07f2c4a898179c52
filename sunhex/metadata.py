from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import SunhexConfig
from .constants import METADATA_PATH
from .errors import MetadataError, MissingCredentials


log = logging.getLogger(__name__)


class MetadataClient:
    """Client for the server-side fragment metadata endpoint.

    The request is ``POST {base_url}/api/v1/metadata`` with a JSON body
    ``{"fragment": ...}`` and a bearer token. Nothing in the local
    encode/decode path depends on it.
    """

    def __init__(self, config: SunhexConfig, *, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport

    def fetch(self, fragment: str) -> Dict[str, Any]:
        if not self.config.api_key:
            raise MissingCredentials("API key required for metadata requests")
        url = self.config.base_url.rstrip("/") + METADATA_PATH
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        log.debug("POST %s (fragment length %d)", url, len(fragment))
        try:
            with httpx.Client(timeout=self.config.timeout, transport=self._transport) as client:
                response = client.post(url, json={"fragment": fragment}, headers=headers)
        except httpx.HTTPError as e:
            raise MetadataError(None, str(e)) from e
        if response.status_code >= 400:
            raise MetadataError(response.status_code, response.text)
        try:
            return response.json()
        except ValueError:
            raise MetadataError(response.status_code, "response body is not JSON")

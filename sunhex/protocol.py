"""Fragment facade: crystallize a PersonalInfo into a hex fragment and back.

Encode:  PersonalInfo -> FieldCodec.pack -> PBKDF2 + AES-GCM -> envelope -> hex
Decode:  hex -> envelope -> PBKDF2 + AES-GCM -> FieldCodec.unpack -> PersonalInfo

Each call is self-contained; a ``Sunhex`` instance holds only immutable
collaborators and may be shared between threads.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from . import envelope
from .config import SunhexConfig, load_config
from .constants import SALT_SIZE
from .countries import CountryTable
from .crypto import CryptoProvider
from .errors import SunhexError
from .fields import FieldCodec
from .metadata import MetadataClient
from .record import PersonalInfo


log = logging.getLogger(__name__)


class Sunhex:
    def __init__(
        self,
        config: Optional[SunhexConfig] = None,
        *,
        provider: Optional[CryptoProvider] = None,
        countries: Optional[CountryTable] = None,
        strict_country: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config if config is not None else SunhexConfig()
        self.provider = provider if provider is not None else CryptoProvider()
        self.fields = FieldCodec(countries, strict_country=strict_country)
        self._metadata = MetadataClient(self.config, transport=transport)

    def crystallize(self, info: PersonalInfo, password: str) -> str:
        plaintext = self.fields.pack(info)
        salt = self.provider.random_bytes(SALT_SIZE)
        key = self.provider.derive_key(password, salt)
        ciphertext, nonce = self.provider.encrypt(plaintext, key)
        fragment = envelope.to_hex(envelope.pack(salt, nonce, ciphertext))
        log.debug("crystallized fragment (%d hex chars)", len(fragment))
        return fragment

    def resolve(self, fragment: str, password: str) -> PersonalInfo:
        try:
            env = envelope.unpack(envelope.from_hex(fragment))
            key = self.provider.derive_key(password, env.salt)
            plaintext = self.provider.decrypt(env.ciphertext, key, env.nonce)
            info = self.fields.unpack(plaintext)
        except SunhexError as e:
            log.debug("resolve failed: %s", type(e).__name__)
            raise
        log.debug("resolved fragment (%d hex chars)", len(fragment))
        return info

    def fetch_metadata(self, fragment: str) -> Dict[str, Any]:
        return self._metadata.fetch(fragment)


def create_client(**overrides: Any) -> Sunhex:
    """Build a ``Sunhex`` from environment configuration.

    Keyword arguments matching ``SunhexConfig`` fields replace the loaded
    values; the rest are passed to the ``Sunhex`` constructor.
    """
    config = load_config()
    for name in ("api_key", "base_url", "timeout"):
        if overrides.get(name) is not None:
            setattr(config, name, overrides[name])
        overrides.pop(name, None)
    return Sunhex(config, **overrides)

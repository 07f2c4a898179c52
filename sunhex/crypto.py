"""Password-based authenticated encryption for fragments.

Keys are derived with PBKDF2-HMAC-SHA256 (fixed iteration count, 32-byte
output) and used with AES-256-GCM under a fresh random 12-byte nonce. Both
primitives come from PyCryptodomex. The 16-byte GCM tag is appended to the
ciphertext, matching the layout WebCrypto produces.
"""

from __future__ import annotations

import os
from typing import Callable, Tuple

from Cryptodome.Cipher import AES
from Cryptodome.Hash import SHA256
from Cryptodome.Protocol.KDF import PBKDF2

from .constants import KEY_SIZE, NONCE_SIZE, PBKDF2_ITERATIONS, TAG_SIZE
from .errors import AuthenticationFailure


class CryptoProvider:
    """Key derivation plus AES-GCM with the fragment's fixed parameters.

    ``random_bytes`` is the source used for nonces (and, via the facade,
    salts). It must be cryptographically secure; tests may pass a
    deterministic one.
    """

    def __init__(self, random_bytes: Callable[[int], bytes] = os.urandom):
        self.random_bytes = random_bytes

    def derive_key(self, password: str, salt: bytes) -> bytes:
        return PBKDF2(
            password.encode("utf-8"),
            salt,
            dkLen=KEY_SIZE,
            count=PBKDF2_ITERATIONS,
            hmac_hash_module=SHA256,
        )

    def encrypt(self, plaintext: bytes, key: bytes) -> Tuple[bytes, bytes]:
        """Encrypt and authenticate ``plaintext``.

        Returns (ciphertext_with_tag, nonce).
        """
        nonce = self.random_bytes(NONCE_SIZE)
        if len(nonce) != NONCE_SIZE:
            raise ValueError(f"random source returned {len(nonce)} bytes, expected {NONCE_SIZE}")
        cipher = AES.new(key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_SIZE)
        ciphertext, tag = cipher.encrypt_and_digest(plaintext)
        return ciphertext + tag, nonce

    def decrypt(self, ciphertext: bytes, key: bytes, nonce: bytes) -> bytes:
        # Every failure below surfaces as the same AuthenticationFailure so a
        # wrong password cannot be told apart from a tampered fragment.
        if len(ciphertext) < TAG_SIZE or len(nonce) != NONCE_SIZE:
            raise AuthenticationFailure()
        cipher = AES.new(key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_SIZE)
        try:
            return cipher.decrypt_and_verify(ciphertext[:-TAG_SIZE], ciphertext[-TAG_SIZE:])
        except ValueError:
            raise AuthenticationFailure() from None

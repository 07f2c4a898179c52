"""Outer envelope codec (format version 2) and its hex text form.

Layout:

    version u8 | salt[8] | nonce[12] | ciphertext (AES-GCM output, tag appended)

The fragment is the envelope as uppercase hex with no separators.
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass

from .constants import ENVELOPE_HEADER_SIZE, ENVELOPE_VERSION, NONCE_SIZE, SALT_SIZE
from .errors import InvalidFormat, UnsupportedVersion


_SALT_OFF = 1
_NONCE_OFF = _SALT_OFF + SALT_SIZE


@dataclass
class Envelope:
    salt: bytes
    nonce: bytes
    ciphertext: bytes


def pack(salt: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    if len(salt) != SALT_SIZE:
        raise ValueError(f"salt must be {SALT_SIZE} bytes")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes")
    return bytes([ENVELOPE_VERSION]) + salt + nonce + ciphertext


def unpack(data: bytes) -> Envelope:
    if not data:
        raise InvalidFormat("Envelope is empty")
    # The version byte is checked before the length so that any foreign
    # version is reported as such, however short the buffer.
    if data[0] != ENVELOPE_VERSION:
        raise UnsupportedVersion(data[0], ENVELOPE_VERSION)
    if len(data) < ENVELOPE_HEADER_SIZE:
        raise InvalidFormat(f"Envelope too short: {len(data)} bytes")
    return Envelope(
        salt=bytes(data[_SALT_OFF:_NONCE_OFF]),
        nonce=bytes(data[_NONCE_OFF:ENVELOPE_HEADER_SIZE]),
        ciphertext=bytes(data[ENVELOPE_HEADER_SIZE:]),
    )


def to_hex(data: bytes) -> str:
    return binascii.hexlify(data).decode("ascii").upper()


def from_hex(text: str) -> bytes:
    """Decode a fragment. Either letter case is accepted; whitespace is not."""
    if len(text) % 2:
        raise InvalidFormat("Fragment has odd length")
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError):
        raise InvalidFormat("Fragment contains non-hexadecimal characters")

"""
Sunhex — password-protected personal-data fragments.

A PersonalInfo record (name, country, birth date, gender) is packed into a
compact versioned binary record, encrypted with AES-256-GCM under a
PBKDF2-derived key, wrapped in a versioned envelope with its salt and nonce,
and rendered as an uppercase hex "fragment". Decoding needs only the
fragment and the password; no server state is involved.

Typical use:

    from sunhex import Sunhex, PersonalInfo

    client = Sunhex()
    fragment = client.crystallize(info, "1234")
    info = client.resolve(fragment, "1234")

See sunhex.fields and sunhex.envelope for the two wire layouts.
"""

from .errors import (
    AuthenticationFailure,
    EncodingOverflow,
    InvalidFormat,
    SunhexError,
    UnknownCountry,
    UnsupportedVersion,
)
from .protocol import Sunhex, create_client
from .record import PersonalInfo

__version__ = "0.1"

__all__ = [
    "Sunhex",
    "create_client",
    "PersonalInfo",
    "SunhexError",
    "UnsupportedVersion",
    "InvalidFormat",
    "EncodingOverflow",
    "AuthenticationFailure",
    "UnknownCountry",
]

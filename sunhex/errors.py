from typing import Optional


class SunhexError(Exception):
    """Base class for Sunhex-specific errors."""


# Wire format
class UnsupportedVersion(SunhexError):
    def __init__(self, version: int, expected: int):
        self.version = version
        self.expected = expected
        super().__init__(f"Unsupported format version {version} (expected {expected})")


class InvalidFormat(SunhexError):
    pass


class EncodingOverflow(SunhexError):
    pass


class UnknownCountry(SunhexError):
    pass


# Crypto
class AuthenticationFailure(SunhexError):
    """Decryption failed: wrong password, or the fragment was altered."""

    def __init__(self):
        super().__init__("Authentication failed")


# Boundary (config / metadata service)
class ConfigError(SunhexError):
    pass


class MissingCredentials(SunhexError):
    pass


class MetadataError(SunhexError):
    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(f"Metadata request failed: {message}")
        else:
            super().__init__(f"Metadata request failed ({status_code}): {message}")

import datetime


# Format versions (first byte of each layout)
INNER_VERSION = 1
ENVELOPE_VERSION = 2

# Inner record (v1): version u8 | gender u8 | country u16 | days u16 | name_len u8 | name
INNER_HEADER_SIZE = 7
MAX_NAME_BYTES = 0xFF
MAX_DAY_OFFSET = 0xFFFF

# Envelope (v2): version u8 | salt[8] | nonce[12] | ciphertext
SALT_SIZE = 8
NONCE_SIZE = 12
TAG_SIZE = 16
ENVELOPE_HEADER_SIZE = 1 + SALT_SIZE + NONCE_SIZE  # 21

# Key derivation and cipher (PBKDF2-HMAC-SHA256 -> AES-256-GCM)
KEY_SIZE = 32
PBKDF2_ITERATIONS = 100_000

# Day offsets are counted from this UTC calendar date
EPOCH = datetime.date(1900, 1, 1)

# Gender codes stored in the inner record
GENDER_UNKNOWN = 0
GENDER_MALE = 1
GENDER_FEMALE = 2
GENDER_OTHER = 3

UNKNOWN_COUNTRY = "??"

DEFAULT_BASE_URL = "https://protocol.sunhex.com"
DEFAULT_TIMEOUT = 10.0
METADATA_PATH = "/api/v1/metadata"

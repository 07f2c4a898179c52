"""Inner record codec (format version 1).

Layout (big-endian, fixed 7-byte header followed by the name):

    version u8 | gender u8 | country_index u16 | day_offset u16 | name_len u8 | name[name_len]

``name`` is ``first_name + " " + last_name`` in UTF-8. ``day_offset`` counts
whole days since 1900-01-01 UTC, so only birth dates up to day 65535
(2079-06-06) are representable. Buffers longer than 7 + name_len are refused.
"""

from __future__ import annotations

import datetime
import struct
from typing import Optional

from .constants import (
    EPOCH,
    GENDER_UNKNOWN,
    INNER_HEADER_SIZE,
    INNER_VERSION,
    MAX_DAY_OFFSET,
    MAX_NAME_BYTES,
)
from .countries import CountryTable, default_table
from .errors import EncodingOverflow, InvalidFormat, UnknownCountry, UnsupportedVersion
from .record import GENDER_CODES, GENDER_NAMES, OTHER, PersonalInfo


_INNER_HDR_STRUCT = struct.Struct(">BBHHB")


def day_offset(year: int, month: int, day: int) -> int:
    """Whole days between the epoch and the given calendar date."""
    try:
        birth = datetime.date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidFormat(f"Invalid birth date {year}-{month}-{day}: {e}")
    # Calendar dates carry no time zone; the difference is the UTC day count.
    days = (birth - EPOCH).days
    if not 0 <= days <= MAX_DAY_OFFSET:
        raise EncodingOverflow(f"Birth date {birth.isoformat()} is outside the encodable range")
    return days


def date_from_offset(days: int) -> datetime.date:
    return EPOCH + datetime.timedelta(days=days)


class FieldCodec:
    def __init__(self, countries: Optional[CountryTable] = None, *, strict_country: bool = False):
        self.countries = countries if countries is not None else default_table()
        self.strict_country = strict_country

    def _country_index(self, code: str) -> int:
        idx = self.countries.index_of(code)
        if idx is not None:
            return idx
        if self.strict_country:
            raise UnknownCountry(f"Unknown country code: {code!r}")
        # Unrecognised codes fall back to the first table entry.
        return 0

    def pack(self, info: PersonalInfo) -> bytes:
        name = f"{info.first_name} {info.last_name}".encode("utf-8")
        if len(name) > MAX_NAME_BYTES:
            raise EncodingOverflow(f"Full name is {len(name)} bytes; at most {MAX_NAME_BYTES} fit")
        days = day_offset(info.birth_year, info.birth_month, info.birth_day)
        country = self._country_index(info.country_code)
        gender = GENDER_CODES.get(info.gender, GENDER_UNKNOWN)
        return _INNER_HDR_STRUCT.pack(INNER_VERSION, gender, country, days, len(name)) + name

    def unpack(self, data: bytes) -> PersonalInfo:
        if not data:
            raise InvalidFormat("Inner record is empty")
        if data[0] != INNER_VERSION:
            raise UnsupportedVersion(data[0], INNER_VERSION)
        if len(data) < INNER_HEADER_SIZE:
            raise InvalidFormat("Inner record too short")
        _version, gender, country, days, name_len = _INNER_HDR_STRUCT.unpack_from(data)
        end = INNER_HEADER_SIZE + name_len
        if len(data) != end:
            raise InvalidFormat(f"Inner record length mismatch: expected {end} bytes, got {len(data)}")
        try:
            full_name = bytes(data[INNER_HEADER_SIZE:end]).decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidFormat("Name is not valid UTF-8")
        first_name, _, last_name = full_name.partition(" ")
        birth = date_from_offset(days)
        return PersonalInfo(
            first_name=first_name,
            last_name=last_name,
            country_code=self.countries.code_at(country),
            birth_year=birth.year,
            birth_month=birth.month,
            birth_day=birth.day,
            # Code 0 (and anything unassigned) decodes as Other.
            gender=GENDER_NAMES.get(gender, OTHER),
        )

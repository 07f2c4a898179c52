"""ISO 3166-1 alpha-2 country table.

Fragments store a country as its position in ``ISO_3166_ALPHA2``. The
order is part of the persisted format: entries may only ever be appended,
never inserted, removed, or re-sorted, or every issued fragment decodes to
the wrong country.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Sequence, Tuple

from .constants import UNKNOWN_COUNTRY


ISO_3166_ALPHA2: Tuple[str, ...] = (
    "AD", "AE", "AF", "AG", "AI", "AL", "AM", "AO", "AQ", "AR",
    "AS", "AT", "AU", "AW", "AX", "AZ", "BA", "BB", "BD", "BE",
    "BF", "BG", "BH", "BI", "BJ", "BL", "BM", "BN", "BO", "BQ",
    "BR", "BS", "BT", "BV", "BW", "BY", "BZ", "CA", "CC", "CD",
    "CF", "CG", "CH", "CI", "CK", "CL", "CM", "CN", "CO", "CR",
    "CU", "CV", "CW", "CX", "CY", "CZ", "DE", "DJ", "DK", "DM",
    "DO", "DZ", "EC", "EE", "EG", "EH", "ER", "ES", "ET", "FI",
    "FJ", "FK", "FM", "FO", "FR", "GA", "GB", "GD", "GE", "GF",
    "GG", "GH", "GI", "GL", "GM", "GN", "GP", "GQ", "GR", "GS",
    "GT", "GU", "GW", "GY", "HK", "HM", "HN", "HR", "HT", "HU",
    "ID", "IE", "IL", "IM", "IN", "IO", "IQ", "IR", "IS", "IT",
    "JE", "JM", "JO", "JP", "KE", "KG", "KH", "KI", "KM", "KN",
    "KP", "KR", "KW", "KY", "KZ", "LA", "LB", "LC", "LI", "LK",
    "LR", "LS", "LT", "LU", "LV", "LY", "MA", "MC", "MD", "ME",
    "MF", "MG", "MH", "MK", "ML", "MM", "MN", "MO", "MP", "MQ",
    "MR", "MS", "MT", "MU", "MV", "MW", "MX", "MY", "MZ", "NA",
    "NC", "NE", "NF", "NG", "NI", "NL", "NO", "NP", "NR", "NU",
    "NZ", "OM", "PA", "PE", "PF", "PG", "PH", "PK", "PL", "PM",
    "PN", "PR", "PS", "PT", "PW", "PY", "QA", "RE", "RO", "RS",
    "RU", "RW", "SA", "SB", "SC", "SD", "SE", "SG", "SH", "SI",
    "SJ", "SK", "SL", "SM", "SN", "SO", "SR", "SS", "ST", "SV",
    "SX", "SY", "SZ", "TC", "TD", "TF", "TG", "TH", "TJ", "TK",
    "TL", "TM", "TN", "TO", "TR", "TT", "TV", "TW", "TZ", "UA",
    "UG", "UM", "US", "UY", "UZ", "VA", "VC", "VE", "VG", "VI",
    "VN", "VU", "WF", "WS", "YE", "YT", "ZA", "ZM", "ZW",
)


class CountryTable:
    """Immutable ordered list of country codes, looked up by code or by index."""

    def __init__(self, codes: Sequence[str]):
        normalized = tuple(c.upper() for c in codes)
        if len(normalized) > 0xFFFF:
            raise ValueError("Country table must fit a 16-bit index")
        index: Dict[str, int] = {}
        for i, code in enumerate(normalized):
            if code in index:
                raise ValueError(f"Duplicate country code in table: {code}")
            index[code] = i
        self._codes = normalized
        self._index = index

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._index

    def index_of(self, code: str) -> Optional[int]:
        """Return the table index for ``code`` (case-insensitive), or None."""
        return self._index.get(code.upper())

    def code_at(self, index: int) -> str:
        """Return the code stored at ``index``, or ``"??"`` when out of range."""
        if 0 <= index < len(self._codes):
            return self._codes[index]
        return UNKNOWN_COUNTRY


def default_table() -> CountryTable:
    return CountryTable(ISO_3166_ALPHA2)

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .constants import GENDER_FEMALE, GENDER_MALE, GENDER_OTHER


MALE = "Male"
FEMALE = "Female"
OTHER = "Other"

GENDER_CODES: Dict[str, int] = {
    MALE: GENDER_MALE,
    FEMALE: GENDER_FEMALE,
    OTHER: GENDER_OTHER,
}
GENDER_NAMES: Dict[int, str] = {code: name for name, code in GENDER_CODES.items()}


@dataclass
class PersonalInfo:
    first_name: str
    last_name: str
    country_code: str
    birth_year: int
    birth_month: int
    birth_day: int
    gender: str = OTHER

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonalInfo":
        return cls(
            first_name=data["first_name"],
            last_name=data["last_name"],
            country_code=data["country_code"],
            birth_year=int(data["birth_year"]),
            birth_month=int(data["birth_month"]),
            birth_day=int(data["birth_day"]),
            gender=data.get("gender", OTHER),
        )

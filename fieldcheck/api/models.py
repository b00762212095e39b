"""Request records accepted by the HTTP example."""

from datetime import datetime, timezone

from pydantic import ConfigDict, Field, field_validator
from pydantic.dataclasses import dataclass

from fieldcheck.validation import ValidationErrors
from fieldcheck.validation.checks import (
    date_before,
    equal,
    not_empty,
    positive_number,
    str_length,
)

# Value a timestamp takes when the client leaves it out
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)

MINIMUM_AGE_YEARS = 16


def years_ago(years: int, now: datetime | None = None) -> datetime:
    """Same calendar day ``years`` years before ``now``; Feb 29 rolls to Mar 1."""
    now = now or datetime.now(timezone.utc)
    try:
        return now.replace(year=now.year - years)
    except ValueError:
        return now.replace(year=now.year - years, month=3, day=1)


@dataclass(config=ConfigDict(populate_by_name=True))
class SignupRequest:
    """A signup form. Missing JSON keys decode to their zero values."""

    name: str = ""
    dob: datetime = ZERO_TIME
    is_enabled: bool = Field(default=False, alias="isEnabled")
    count: int = 0

    @field_validator("dob")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def validate(self) -> ValidationErrors:
        return (
            ValidationErrors()
            .validate("name", str_length(self.name, 4, 10))
            .validate(
                "dob",
                not_empty(self.dob),
                date_before(self.dob, years_ago(MINIMUM_AGE_YEARS)),
            )
            .validate("isEnabled", equal(self.is_enabled, False))
            .validate("count", positive_number(self.count))
        )

"""Request and response models for the candidate API."""

import re
from datetime import date, datetime
from typing import Annotated, Generic, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    StringConstraints,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

from app.core.config import (
    DATE_FORMAT,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PHONE_MAX_LENGTH,
    PHONE_MIN_DIGITS,
    PHONE_PATTERN,
)

_WIRE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_wire_date(value):
    """Accept only ``YYYY-MM-DD`` strings (or ready ``date`` objects)."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, str) and _WIRE_DATE_RE.match(value):
        try:
            return datetime.strptime(value, DATE_FORMAT).date()
        except ValueError:
            pass
    raise ValueError("Invalid date format. Expected format: YYYY-MM-DD")


def format_wire_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


WireDate = Annotated[
    date,
    BeforeValidator(parse_wire_date),
    PlainSerializer(format_wire_date, return_type=str, when_used="json"),
]


def _check_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("Name cannot be blank")
    return value


def _check_phone_digits(value: str) -> str:
    if sum(ch.isdigit() for ch in value) < PHONE_MIN_DIGITS:
        raise ValueError(f"Phone number must contain at least {PHONE_MIN_DIGITS} digits")
    return value


CandidateName = Annotated[
    str,
    StringConstraints(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH),
    AfterValidator(_check_not_blank),
]
PhoneNumber = Annotated[
    str,
    StringConstraints(max_length=PHONE_MAX_LENGTH, pattern=PHONE_PATTERN),
    AfterValidator(_check_phone_digits),
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_email(value: str) -> str:
    """Plain address only, kept exactly as sent."""
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email cannot have more than {EMAIL_MAX_LENGTH} characters")
    if "<" in value or ">" in value:
        raise ValueError("Email must be a plain address without a display name")
    validate_email(value)
    return value


CandidateEmail = Annotated[str, AfterValidator(_check_email)]


# --------------- Requests ---------------


class CreateCandidateRequest(CamelModel):
    name: CandidateName
    birthday: WireDate
    phone_number: PhoneNumber
    email: CandidateEmail


class CreateCandidateWithSkillsRequest(CreateCandidateRequest):
    skill_ids: list[int] = Field(default_factory=list)

    @field_validator("skill_ids", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class UpdateCandidateRequest(CamelModel):
    """Partial update. Only fields present in the body are considered."""

    name: CandidateName | None = None
    birthday: WireDate | None = None
    phone_number: PhoneNumber | None = None
    email: CandidateEmail | None = None

    @field_validator("name", "phone_number", "email", mode="before")
    @classmethod
    def _blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def provided(self) -> dict:
        """Fields the caller actually supplied with a usable value."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class AddSkillsRequest(CamelModel):
    skill_ids: list[int]


# --------------- Responses ---------------


class SkillResponse(CamelModel):
    id: int
    name: str


class CandidateResponse(CamelModel):
    id: int
    name: str
    birthday: WireDate
    phone_number: str
    email: str
    skills: list[SkillResponse] = Field(default_factory=list)


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T | None = None
    message: str | None = None

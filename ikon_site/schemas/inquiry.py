from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ServiceType(str, enum.Enum):
    INVESTMENT = "investment"
    MANAGEMENT = "management"
    BROKERAGE = "brokerage"
    LENDING = "lending"


ALL_SERVICE_TYPES: frozenset[str] = frozenset(s.value for s in ServiceType)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InquiryCreate(_CamelModel):
    """Fields a visitor submits. `id` / `createdAt` are never read from input."""

    name: str = Field(min_length=2)
    email: str
    phone: Optional[str] = None
    message: str = Field(min_length=10)
    service_type: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _email_syntax(cls, v: str) -> str:
        try:
            # syntax only: .test, .local and other reserved domains are fine
            validate_email(v, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        # stored exactly as typed
        return v


class InquiryOut(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str]
    message: str
    service_type: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        # sqlite hands back naive datetimes
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ValidationErrorOut(BaseModel):
    message: str = "Validation failed"
    errors: list[FieldErrorOut]


class ServerErrorOut(BaseModel):
    message: str = "Internal Server Error"

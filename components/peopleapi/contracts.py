from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictStr, field_validator

from components.peoplestore.models import Person

NAME_MAX_LEN = 100
NICKNAME_MAX_LEN = 32
TECH_MAX_LEN = 32

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# ---------- Requests ----------

class NewPerson(BaseModel):
    name: StrictStr
    nickname: StrictStr
    birthdate: date = Field(..., description="Calendar date, YYYY-MM-DD")
    stack: Optional[List[StrictStr]] = None

    @field_validator("birthdate", mode="before")
    @classmethod
    def parse_birthdate(cls, v: Any) -> date:
        if isinstance(v, date) and not isinstance(v, datetime):
            return v
        if not isinstance(v, str) or not _DATE_RE.fullmatch(v):
            raise ValueError("birthdate must be a YYYY-MM-DD string")
        return date.fromisoformat(v)


# ---------- Validation results ----------

class FieldViolation(BaseModel):
    field: str
    message: str


# ---------- Responses ----------

class CountResult(BaseModel):
    count: int


class HealthResult(BaseModel):
    ok: bool = True


class ErrorPayload(BaseModel):
    type: Literal["BAD_REQUEST", "NOT_FOUND", "CONFLICT", "VALIDATION", "INTERNAL"]
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    error: ErrorPayload


__all__ = [
    "NAME_MAX_LEN",
    "NICKNAME_MAX_LEN",
    "TECH_MAX_LEN",
    "NewPerson",
    "Person",
    "FieldViolation",
    "CountResult",
    "HealthResult",
    "ErrorPayload",
    "ErrorEnvelope",
]

from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Person(BaseModel):
    """Stored person record. Never mutated after insertion."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    nickname: str
    birthdate: date
    stack: Optional[List[str]] = None

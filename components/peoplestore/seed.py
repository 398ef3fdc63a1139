from __future__ import annotations

import uuid
from datetime import date
from typing import Callable, List
from uuid import UUID

from .models import Person


def seed_people(id_factory: Callable[[], UUID] = uuid.uuid4) -> List[Person]:
    """Example record every fresh store starts with."""
    return [
        Person(
            id=id_factory(),
            name="Marcos Felipe",
            nickname="marcosvieira",
            birthdate=date(1992, 4, 12),
            stack=["frontend", "backend"],
        )
    ]

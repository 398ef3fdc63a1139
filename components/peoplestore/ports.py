from __future__ import annotations

from typing import List, Optional, Protocol
from uuid import UUID

from .models import Person


class PeopleStorePort(Protocol):
    async def get(self, person_id: UUID) -> Optional[Person]: ...

    async def insert(self, person: Person) -> None: ...

    async def count(self) -> int: ...

    async def list(self) -> List[Person]: ...

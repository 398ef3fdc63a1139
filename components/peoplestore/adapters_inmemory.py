from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from .errors import DuplicateIdError
from .locks import ReadWriteLock
from .models import Person
from .ports import PeopleStorePort

log = logging.getLogger("peoplestore.inmemory")


class InMemoryPeopleStore(PeopleStorePort):
    """
    Process-local store keyed by person id.
    Storage: { id: Person }, insertion-ordered, guarded by a ReadWriteLock.
    """

    def __init__(self, seed: Optional[Iterable[Person]] = None) -> None:
        self._people: Dict[UUID, Person] = {}
        self._lock = ReadWriteLock()
        for person in seed or ():
            if person.id in self._people:
                raise DuplicateIdError(f"duplicate seed id {person.id}")
            self._people[person.id] = person
        if self._people:
            log.info("store_seeded count=%d", len(self._people))

    # -------- Port methods --------

    async def get(self, person_id: UUID) -> Optional[Person]:
        async with self._lock.read():
            return self._people.get(person_id)

    async def insert(self, person: Person) -> None:
        async with self._lock.write():
            if person.id in self._people:
                raise DuplicateIdError(f"person {person.id} already stored")
            self._people[person.id] = person
        log.debug("person_inserted id=%s", person.id)

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._people)

    async def list(self) -> List[Person]:
        async with self._lock.read():
            return list(self._people.values())

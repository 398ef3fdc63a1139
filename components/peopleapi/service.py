from __future__ import annotations

import logging
import uuid
from typing import Callable, List
from uuid import UUID

from components.peoplestore import DuplicateIdError, PeopleStorePort, Person

from .contracts import NewPerson
from .errors import ConflictError, NotFoundError, ValidationError
from .validation import validate_new_person

log = logging.getLogger("peopleapi.service")


class PeopleService:
    """
    Use cases behind the people routes: validate -> build record -> single store call.
    Holds no state of its own; the store is the only shared resource.
    """

    def __init__(self, store: PeopleStorePort, id_factory: Callable[[], UUID] = uuid.uuid4) -> None:
        self.store = store
        self._id_factory = id_factory

    async def list_people(self) -> List[Person]:
        return await self.store.list()

    async def get_person(self, person_id: str) -> Person:
        try:
            pid = UUID(person_id)
        except ValueError:
            log.info("get_person_bad_id id=%r", person_id)
            raise NotFoundError()
        person = await self.store.get(pid)
        if person is None:
            raise NotFoundError()
        return person

    async def create_person(self, payload: NewPerson) -> Person:
        violations = validate_new_person(payload)
        if violations:
            log.info("create_person_rejected fields=%s", ",".join(v.field for v in violations))
            raise ValidationError(details={"violations": [v.model_dump() for v in violations]})

        person = Person(
            id=self._id_factory(),
            name=payload.name,
            nickname=payload.nickname,
            birthdate=payload.birthdate,
            stack=list(payload.stack) if payload.stack is not None else None,
        )
        try:
            await self.store.insert(person)
        except DuplicateIdError as e:
            log.warning("create_person_conflict id=%s", person.id)
            raise ConflictError(str(e))
        log.info("person_created id=%s", person.id)
        return person

    async def count_people(self) -> int:
        return await self.store.count()

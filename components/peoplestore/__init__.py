"""
PeopleStore package export surface.
"""

from .models import Person
from .errors import PeopleStoreError, DuplicateIdError
from .ports import PeopleStorePort
from .locks import ReadWriteLock
from .adapters_inmemory import InMemoryPeopleStore
from .seed import seed_people

__all__ = [
    "Person",
    "PeopleStoreError",
    "DuplicateIdError",
    "PeopleStorePort",
    "ReadWriteLock",
    "InMemoryPeopleStore",
    "seed_people",
]

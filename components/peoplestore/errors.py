from __future__ import annotations


class PeopleStoreError(RuntimeError):
    """Base typed error for all people store failures."""


class DuplicateIdError(PeopleStoreError):
    """A record with the same id is already stored."""

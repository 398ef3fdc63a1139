from __future__ import annotations

from typing import List

from .contracts import NAME_MAX_LEN, NICKNAME_MAX_LEN, TECH_MAX_LEN, FieldViolation, NewPerson


def validate_new_person(payload: NewPerson) -> List[FieldViolation]:
    """Length checks for a create payload. An empty list means the payload is valid."""
    violations: List[FieldViolation] = []
    if len(payload.name) > NAME_MAX_LEN:
        violations.append(
            FieldViolation(field="name", message=f"name must be at most {NAME_MAX_LEN} characters")
        )
    if len(payload.nickname) > NICKNAME_MAX_LEN:
        violations.append(
            FieldViolation(field="nickname", message=f"nickname must be at most {NICKNAME_MAX_LEN} characters")
        )
    for i, tech in enumerate(payload.stack or []):
        if len(tech) > TECH_MAX_LEN:
            violations.append(
                FieldViolation(field=f"stack.{i}", message=f"each stack entry must be at most {TECH_MAX_LEN} characters")
            )
    return violations

from __future__ import annotations
from typing import Any, Dict, Optional


class PeopleApiError(Exception):
    type: str = "INTERNAL"
    code: str = "internal_error"
    message: str = "Internal server error"
    status_code: int = 500

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        if message:
            self.message = message
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "code": self.code,
            "message": self.message,
            "details": self.details or {},
        }


class BadRequestError(PeopleApiError):
    type = "BAD_REQUEST"
    code = "malformed_body"
    message = "Request body could not be parsed"
    status_code = 400


class NotFoundError(PeopleApiError):
    type = "NOT_FOUND"
    code = "person_not_found"
    message = "Person not found"
    status_code = 404


class ConflictError(PeopleApiError):
    type = "CONFLICT"
    code = "person_exists"
    message = "Person already exists"
    status_code = 409


class ValidationError(PeopleApiError):
    type = "VALIDATION"
    code = "validation_error"
    message = "Validation error"
    status_code = 422

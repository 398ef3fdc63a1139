from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from .contracts import ErrorEnvelope, ErrorPayload
from .errors import BadRequestError, PeopleApiError

logger = logging.getLogger("peopleapi.errors")


def _error_response(err: PeopleApiError) -> JSONResponse:
    envelope = ErrorEnvelope(error=ErrorPayload(**err.to_payload()))
    return JSONResponse(status_code=err.status_code, content=envelope.model_dump(mode="json"))


def _describe(errors) -> List[Dict[str, Any]]:
    # pydantic error ctx may hold exception objects; keep only JSON-safe parts
    return [
        {"loc": [str(p) for p in e.get("loc", ())], "msg": str(e.get("msg", "")), "type": str(e.get("type", ""))}
        for e in errors
    ]


async def handle_people_error(request: Request, exc: PeopleApiError) -> JSONResponse:
    logger.info("request.rejected code=%s status=%d path=%s", exc.code, exc.status_code, request.url.path)
    return _error_response(exc)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = BadRequestError(details={"errors": _describe(exc.errors())})
    logger.info("request.malformed path=%s errors=%d", request.url.path, len(err.details["errors"]))
    return _error_response(err)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PeopleApiError, handle_people_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)

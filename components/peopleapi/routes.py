from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, status

from .contracts import CountResult, ErrorEnvelope, HealthResult, NewPerson, Person
from .service import PeopleService


def get_service(request: Request) -> PeopleService:
    # Bound per app in create_app; tests can swap it via dependency_overrides
    return request.app.state.people_service


router = APIRouter(tags=["people"], responses={400: {"model": ErrorEnvelope}})


@router.get("/people", response_model=List[Person])
async def list_people(svc: PeopleService = Depends(get_service)):
    return await svc.list_people()


@router.get("/people/{person_id}", response_model=Person, responses={404: {"model": ErrorEnvelope}})
async def get_person(person_id: str, svc: PeopleService = Depends(get_service)):
    return await svc.get_person(person_id)


@router.post(
    "/people",
    response_model=Person,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorEnvelope}, 422: {"model": ErrorEnvelope}},
)
async def create_person(payload: NewPerson, svc: PeopleService = Depends(get_service)):
    return await svc.create_person(payload)


@router.get("/count-people", response_model=CountResult)
async def count_people(svc: PeopleService = Depends(get_service)):
    return CountResult(count=await svc.count_people())


@router.get("/health", response_model=HealthResult)
async def health():
    return HealthResult()

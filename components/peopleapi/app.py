from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from components.peoplestore import InMemoryPeopleStore, PeopleStorePort, seed_people

from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .observability import RequestContextMiddleware
from .routes import router
from .service import PeopleService
from .settings import PeopleSettings, get_settings

log = logging.getLogger("peopleapi.app")


def build_store(settings: PeopleSettings) -> InMemoryPeopleStore:
    seed = seed_people() if settings.seed else []
    for person in seed:
        log.info("seed_person id=%s", person.id)
    return InMemoryPeopleStore(seed=seed)


def create_app(settings: Optional[PeopleSettings] = None, store: Optional[PeopleStorePort] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.people_service = PeopleService(store if store is not None else build_store(settings))
    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)

    app.include_router(router)
    return app


app = create_app()

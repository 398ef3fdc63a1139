"""
PeopleApi component package.
Exports the app factory, router and PeopleService for DI.
"""
from .app import create_app, build_store
from .routes import router, get_service
from .service import PeopleService
from .settings import PeopleSettings, get_settings

__all__ = [
    "create_app",
    "build_store",
    "router",
    "get_service",
    "PeopleService",
    "PeopleSettings",
    "get_settings",
]

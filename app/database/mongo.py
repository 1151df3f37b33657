"""MongoDB handles for request handlers."""

from fastapi import Request
from pymongo.database import Database

from app.config import Settings
from ventech_common.mongo import get_database


def connect_database(settings: Settings) -> Database:
    """Return a MongoDB database handle (non-dependency use)."""
    return get_database(settings.MONGODB_URI, settings.MONGODB_DB_NAME)


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the database opened at startup."""
    return request.app.state.db

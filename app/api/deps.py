"""Common dependency aliases for API endpoints."""

from fastapi import Query

from app.config import settings
from app.database.mongo import get_db
from app.middleware.auth import (
    ActiveMerchant,
    ActiveUser,
    AdminUser,
    BlogAuthor,
    CurrentUser,
    MerchantOrAdmin,
    RequestContext,
)


class Pagination:
    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    ):
        self.page = page
        self.limit = limit


__all__ = [
    "get_db",
    "ActiveMerchant",
    "ActiveUser",
    "AdminUser",
    "BlogAuthor",
    "CurrentUser",
    "MerchantOrAdmin",
    "Pagination",
    "RequestContext",
]

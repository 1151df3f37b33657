import logging
from typing import Any, Dict, Optional

from pymongo import DESCENDING
from pymongo.database import Database

from app.core.errors import NotFound
from app.dtos import (
    BlogCreateRequest,
    BlogListResponse,
    BlogResponse,
    DeleteResult,
    MutationResult,
)
from app.middleware.auth import ensure_owner_or_admin
from app.models.entities.blog import Blog, BlogStatus
from app.models.entities.user import User
from app.repositories.blog import BlogRepository
from ventech_common.models.base import utcnow

logger = logging.getLogger(__name__)


def _serialize_blog(blog: Blog) -> BlogResponse:
    return BlogResponse.model_validate(blog.model_dump(by_alias=True))


class BlogService:
    def __init__(self, db: Database):
        self.db = db
        self.blogs = BlogRepository(db)

    def create_blog(self, user: User, payload: BlogCreateRequest) -> BlogResponse:
        blog = Blog(
            **payload.model_dump(),
            status=BlogStatus.DRAFT,
            author_id=user.id,
            author_email=user.email,
        )
        created = self.blogs.insert_one(blog)
        logger.info("Blog drafted", extra={"blog_id": str(created.id)})
        return _serialize_blog(created)

    def list_blogs(
        self, status: Optional[BlogStatus] = None, page: int = 1, limit: int = 20
    ) -> BlogListResponse:
        query: Dict[str, Any] = {}
        if status:
            query["status"] = BlogStatus(status).value
        blogs, total = self.blogs.paginate(
            query,
            sort=[("createdAt", DESCENDING)],
            skip=(page - 1) * limit,
            limit=limit,
        )
        return BlogListResponse(
            total=total, page=page, limit=limit, items=[_serialize_blog(b) for b in blogs]
        )

    def get_blog(self, blog_id: str) -> BlogResponse:
        blog = self.blogs.find_by_id(blog_id)
        if blog is None:
            raise NotFound("Blog not found")
        return _serialize_blog(blog)

    def set_status(self, blog_id: str, status: BlogStatus) -> MutationResult:
        blog = self.blogs.find_by_id(blog_id)
        if blog is None:
            raise NotFound("Blog not found")
        result = self.blogs.update_where(
            {"_id": blog.id, "status": {"$ne": BlogStatus(status).value}},
            {"$set": {"status": BlogStatus(status).value, "updatedAt": utcnow()}},
        )
        return MutationResult.from_result(result)

    def delete_blog(self, blog_id: str, user: User) -> DeleteResult:
        blog = self.blogs.find_by_id(blog_id)
        if blog is None:
            raise NotFound("Blog not found")
        ensure_owner_or_admin(blog.author_id, user)
        return DeleteResult.from_result(self.blogs.delete_where({"_id": blog.id}))

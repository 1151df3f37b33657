from typing import Optional

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.api.deps import AdminUser, BlogAuthor, CurrentUser, Pagination, RequestContext, get_db
from app.dtos import (
    BlogCreateRequest,
    BlogListResponse,
    BlogResponse,
    DeleteResult,
    MutationResult,
)
from app.models.entities.blog import BlogStatus
from app.services.blog_service import BlogService

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
def create_blog(
    payload: BlogCreateRequest,
    ctx: RequestContext = Depends(BlogAuthor),
    db: Database = Depends(get_db),
):
    return BlogService(db).create_blog(ctx.user, payload)


@router.get("", response_model=BlogListResponse)
def list_blogs(
    status: Optional[BlogStatus] = None,
    paging: Pagination = Depends(),
    db: Database = Depends(get_db),
):
    return BlogService(db).list_blogs(status=status, page=paging.page, limit=paging.limit)


@router.get("/{blog_id}", response_model=BlogResponse)
def get_blog(blog_id: str, db: Database = Depends(get_db)):
    return BlogService(db).get_blog(blog_id)


@router.patch(
    "/{blog_id}/publish",
    response_model=MutationResult,
    dependencies=[Depends(AdminUser)],
)
def publish_blog(blog_id: str, db: Database = Depends(get_db)):
    return BlogService(db).set_status(blog_id, BlogStatus.PUBLISHED)


@router.patch(
    "/{blog_id}/unpublish",
    response_model=MutationResult,
    dependencies=[Depends(AdminUser)],
)
def unpublish_blog(blog_id: str, db: Database = Depends(get_db)):
    return BlogService(db).set_status(blog_id, BlogStatus.DRAFT)


@router.delete("/{blog_id}", response_model=DeleteResult)
def delete_blog(
    blog_id: str,
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    return BlogService(db).delete_blog(blog_id, ctx.user)

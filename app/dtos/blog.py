from typing import List, Optional

from pydantic import Field

from app.dtos.base import BaseResponse
from app.models.entities.blog import BlogStatus
from ventech_common.models.base import MongoModel, PyObjectIdStr


class BlogCreateRequest(MongoModel):
    title: str = Field(..., min_length=3)
    thumbnail: Optional[str] = None
    content: str = Field(..., min_length=1)


class BlogResponse(BaseResponse):
    title: str
    thumbnail: Optional[str] = None
    content: str
    status: BlogStatus
    author_id: PyObjectIdStr
    author_email: str


class BlogListResponse(MongoModel):
    total: int
    page: int
    limit: int
    items: List[BlogResponse]

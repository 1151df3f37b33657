from enum import Enum
from typing import Optional

from ventech_common.models.base import BaseEntity, PyObjectId


class BlogStatus(str, Enum):

    DRAFT = "draft"
    PUBLISHED = "published"


class Blog(BaseEntity):
    title: str
    thumbnail: Optional[str] = None
    content: str
    status: BlogStatus = BlogStatus.DRAFT

    author_id: PyObjectId
    author_email: str

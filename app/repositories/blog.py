"""Repository for blog posts."""

from pymongo.database import Database

from app.models.entities.blog import Blog
from ventech_common.repositories.base import BaseRepository, CollectionName


class BlogRepository(BaseRepository[Blog]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.BLOGS, Blog)

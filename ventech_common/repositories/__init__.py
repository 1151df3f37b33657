"""Repository exports for ventech_common."""

from .base import BaseRepository, CollectionName, to_object_id

__all__ = ["BaseRepository", "CollectionName", "to_object_id"]

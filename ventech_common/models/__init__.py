from .base import BaseEntity, MongoModel, PyObjectId, PyObjectIdStr, utcnow

__all__ = ["BaseEntity", "MongoModel", "PyObjectId", "PyObjectIdStr", "utcnow"]

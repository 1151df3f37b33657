"""Common DTO base classes."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ventech_common.models.base import MongoModel, PyObjectIdStr


class BaseResponse(MongoModel):
    """Shared response fields for API DTOs."""

    id: Optional[PyObjectIdStr] = Field(default=None, alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MutationResult(MongoModel):
    """Counts reported by an update against the store."""

    matched_count: int
    modified_count: int

    @classmethod
    def from_result(cls, result) -> "MutationResult":
        return cls(
            matched_count=result.matched_count, modified_count=result.modified_count
        )


class DeleteResult(MongoModel):
    deleted_count: int

    @classmethod
    def from_result(cls, result) -> "DeleteResult":
        return cls(deleted_count=result.deleted_count)


class MessageResponse(MongoModel):
    message: str

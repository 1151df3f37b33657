from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    WithJsonSchema,
)
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_object_id(v: Any) -> Optional[ObjectId]:
    """Validate and convert to ObjectId for entity models."""
    if v is None:
        return None
    if isinstance(v, ObjectId):
        return v
    if isinstance(v, str):
        if not ObjectId.is_valid(v):
            raise ValueError(f"Invalid ObjectId: {v}")
        return ObjectId(v)
    raise ValueError(f"Invalid ObjectId: {v}")


def validate_object_id_str(v: Any) -> Optional[str]:
    """Validate and convert to string for DTOs."""
    if v is None:
        return None
    if isinstance(v, ObjectId):
        return str(v)
    if isinstance(v, str):
        if not ObjectId.is_valid(v):
            raise ValueError(f"Invalid ObjectId: {v}")
        return v
    raise ValueError(f"Invalid ObjectId: {v}")


# PyObjectId for entities - converts str to ObjectId (for DB)
PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(validate_object_id),
    PlainSerializer(lambda x: str(x), return_type=str, when_used="json"),
    WithJsonSchema({"type": "string"}, mode="serialization"),
]

# PyObjectIdStr for DTOs - converts ObjectId to str (for JSON)
PyObjectIdStr = Annotated[str, BeforeValidator(validate_object_id_str)]


class MongoModel(BaseModel):
    """Camel-cased field names on the wire and in the database."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_default=True,
    )


class BaseEntity(MongoModel):
    """Base entity with common fields for all database entities"""

    id: Optional[PyObjectId] = Field(None, alias="_id")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

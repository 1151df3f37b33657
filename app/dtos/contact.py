from pydantic import EmailStr, Field

from app.dtos.base import BaseResponse
from ventech_common.models.base import MongoModel, PyObjectIdStr


class ContactCreateRequest(MongoModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactCreatedResponse(MongoModel):
    message: str
    id: PyObjectIdStr


class ContactResponse(BaseResponse):
    name: str
    email: str
    subject: str
    message: str

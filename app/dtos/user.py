"""User and authentication DTOs"""

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from app.dtos.base import BaseResponse
from app.models.entities.user import SELF_SERVICE_ROLES, AccountStatus, Role
from ventech_common.models.base import MongoModel, PyObjectIdStr


class ShopDetailsIn(MongoModel):
    shop_name: str = Field(..., min_length=2)
    shop_number: str = Field(..., min_length=1)
    shop_address: str = Field(..., min_length=3)
    trade_license: Optional[str] = None


class ShopRequest(MongoModel):
    shop_details: Optional[ShopDetailsIn] = None


class ProfileFields(MongoModel):
    name: Optional[str] = Field(default=None, min_length=2)
    phone: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    blood_group: Optional[str] = None
    district: Optional[str] = None
    upazila: Optional[str] = None
    shop_details: Optional[ShopDetailsIn] = None


class AddUserRequest(ProfileFields):
    email: EmailStr
    role: Role = Role.CUSTOMER

    @field_validator("role")
    @classmethod
    def self_service_role(cls, value: str) -> str:
        if value not in SELF_SERVICE_ROLES:
            allowed = ", ".join(r.value for r in SELF_SERVICE_ROLES)
            raise ValueError(f"Role must be one of: {allowed}")
        return value

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.strip().lower()


class UpdateProfileRequest(ProfileFields):
    pass


class RoleUpdateRequest(MongoModel):
    role: Role


class StatusUpdateRequest(MongoModel):
    status: AccountStatus


class ShopDetailsOut(MongoModel):
    shop_name: Optional[str] = None
    shop_number: Optional[str] = None
    shop_address: Optional[str] = None
    trade_license: Optional[str] = None


class RoleRequestOut(MongoModel):
    type: Optional[str] = None
    status: Optional[str] = None
    requested_at: Optional[datetime] = None


class UserResponse(BaseResponse):
    email: str
    name: Optional[str] = None
    role: Role
    status: AccountStatus
    role_request: Optional[RoleRequestOut] = None
    login_count: int = 0
    phone: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    blood_group: Optional[str] = None
    district: Optional[str] = None
    upazila: Optional[str] = None
    shop_details: Optional[ShopDetailsOut] = None


class UserEnvelope(MongoModel):
    user: UserResponse
    message: Optional[str] = None


class UserListResponse(MongoModel):
    total: int
    page: int
    limit: int
    items: List[UserResponse]


class DonorResponse(MongoModel):
    id: PyObjectIdStr = Field(..., alias="_id")
    name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    blood_group: Optional[str] = None
    district: Optional[str] = None
    upazila: Optional[str] = None

"""User entity - identity plus the authorization grants of an account"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from ventech_common.models.base import BaseEntity, MongoModel, utcnow


class Role(str, Enum):

    ADMIN = "admin"
    MERCHANT = "merchant"
    DONOR = "donor"
    VOLUNTEER = "volunteer"
    CUSTOMER = "customer"


# Roles an account may pick for itself at registration
SELF_SERVICE_ROLES = (Role.CUSTOMER, Role.DONOR)


class AccountStatus(str, Enum):

    ACTIVE = "active"
    PENDING = "pending"
    BLOCKED = "blocked"


class RoleRequestStatus(str, Enum):

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ShopDetails(MongoModel):
    shop_name: Optional[str] = None
    shop_number: Optional[str] = None
    shop_address: Optional[str] = None
    trade_license: Optional[str] = None


class RoleRequest(MongoModel):
    type: Role = Role.MERCHANT
    status: RoleRequestStatus = RoleRequestStatus.PENDING
    requested_at: datetime = Field(default_factory=utcnow)

    @property
    def is_pending(self) -> bool:
        return self.status == RoleRequestStatus.PENDING


class User(BaseEntity):
    email: str
    name: Optional[str] = None
    role: Role = Role.CUSTOMER
    status: AccountStatus = AccountStatus.ACTIVE
    role_request: Optional[RoleRequest] = None
    login_count: int = 0

    phone: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")

    # Donation platform
    blood_group: Optional[str] = None
    district: Optional[str] = None
    upazila: Optional[str] = None

    # Marketplace
    shop_details: Optional[ShopDetails] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

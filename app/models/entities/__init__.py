from app.models.entities.blog import Blog, BlogStatus
from app.models.entities.contact import ContactMessage
from app.models.entities.donation_request import (
    DonationRequest,
    DonationStatus,
    DonorInfo,
)
from app.models.entities.funding import Funding
from app.models.entities.product import Product
from app.models.entities.user import (
    SELF_SERVICE_ROLES,
    AccountStatus,
    Role,
    RoleRequest,
    RoleRequestStatus,
    ShopDetails,
    User,
)

__all__ = [
    "Blog",
    "BlogStatus",
    "ContactMessage",
    "DonationRequest",
    "DonationStatus",
    "DonorInfo",
    "Funding",
    "Product",
    "SELF_SERVICE_ROLES",
    "AccountStatus",
    "Role",
    "RoleRequest",
    "RoleRequestStatus",
    "ShopDetails",
    "User",
]

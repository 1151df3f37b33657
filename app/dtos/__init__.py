"""Data Transfer Objects (DTOs) for API requests and responses"""

from .base import BaseResponse, DeleteResult, MessageResponse, MutationResult
from .blog import BlogCreateRequest, BlogListResponse, BlogResponse
from .contact import ContactCreatedResponse, ContactCreateRequest, ContactResponse
from .donation import (
    DonationRequestCreate,
    DonationRequestEdit,
    DonationRequestListResponse,
    DonationRequestResponse,
    DonationStatusUpdate,
)
from .funding import (
    FundingCreateRequest,
    FundingListResponse,
    FundingResponse,
    FundingTotalResponse,
    PaymentIntentRequest,
    PaymentIntentResponse,
)
from .product import (
    ProductCreateRequest,
    ProductEditRequest,
    ProductListResponse,
    ProductResponse,
    ProductSort,
    StockUpdateRequest,
)
from .user import (
    AddUserRequest,
    DonorResponse,
    RoleUpdateRequest,
    ShopRequest,
    StatusUpdateRequest,
    UpdateProfileRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
)

__all__ = [
    # Base
    "BaseResponse",
    "DeleteResult",
    "MessageResponse",
    "MutationResult",
    # Blog
    "BlogCreateRequest",
    "BlogListResponse",
    "BlogResponse",
    # Contact
    "ContactCreatedResponse",
    "ContactCreateRequest",
    "ContactResponse",
    # Donation
    "DonationRequestCreate",
    "DonationRequestEdit",
    "DonationRequestListResponse",
    "DonationRequestResponse",
    "DonationStatusUpdate",
    # Funding / payments
    "FundingCreateRequest",
    "FundingListResponse",
    "FundingResponse",
    "FundingTotalResponse",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    # Product
    "ProductCreateRequest",
    "ProductEditRequest",
    "ProductListResponse",
    "ProductResponse",
    "ProductSort",
    "StockUpdateRequest",
    # User
    "AddUserRequest",
    "DonorResponse",
    "RoleUpdateRequest",
    "ShopRequest",
    "StatusUpdateRequest",
    "UpdateProfileRequest",
    "UserEnvelope",
    "UserListResponse",
    "UserResponse",
]

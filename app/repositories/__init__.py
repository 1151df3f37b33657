"""Repository exports for the API service."""

from .blog import BlogRepository
from .contact import ContactRepository
from .donation_request import DonationRequestRepository
from .funding import FundingRepository
from .product import ProductRepository
from .user import UserRepository, normalize_email

__all__ = [
    "BlogRepository",
    "ContactRepository",
    "DonationRequestRepository",
    "FundingRepository",
    "ProductRepository",
    "UserRepository",
    "normalize_email",
]

"""Repository for blood donation requests."""

from pymongo import DESCENDING
from pymongo.database import Database

from app.models.entities.donation_request import DonationRequest
from ventech_common.repositories.base import BaseRepository, CollectionName

NEWEST_FIRST = [("createdAt", DESCENDING)]


class DonationRequestRepository(BaseRepository[DonationRequest]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.DONATION_REQUESTS, DonationRequest)

    def ensure_indexes(self) -> None:
        self.collection.create_index("requesterId")
        self.collection.create_index("donationStatus")

"""Repository for recorded fundings."""

from pymongo.database import Database

from app.models.entities.funding import Funding
from ventech_common.repositories.base import BaseRepository, CollectionName


class FundingRepository(BaseRepository[Funding]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.FUNDINGS, Funding)

    def total_amount(self) -> float:
        pipeline = [{"$group": {"_id": None, "total": {"$sum": "$amount"}}}]
        result = list(self.collection.aggregate(pipeline))
        if not result:
            return 0
        return result[0]["total"]

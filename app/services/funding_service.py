import logging

from pymongo import DESCENDING
from pymongo.database import Database

from app.dtos import (
    FundingCreateRequest,
    FundingListResponse,
    FundingResponse,
    FundingTotalResponse,
)
from app.models.entities.funding import Funding
from app.models.entities.user import User
from app.repositories.funding import FundingRepository

logger = logging.getLogger(__name__)


def _serialize_funding(funding: Funding) -> FundingResponse:
    return FundingResponse.model_validate(funding.model_dump(by_alias=True))


class FundingService:
    def __init__(self, db: Database):
        self.db = db
        self.fundings = FundingRepository(db)

    def record_funding(self, user: User, payload: FundingCreateRequest) -> FundingResponse:
        funding = Funding(
            **payload.model_dump(),
            funder_id=user.id,
            funder_name=user.name,
            funder_email=user.email,
        )
        created = self.fundings.insert_one(funding)
        logger.info(
            "Funding recorded",
            extra={"funding_id": str(created.id), "amount": created.amount},
        )
        return _serialize_funding(created)

    def list_fundings(self, page: int = 1, limit: int = 20) -> FundingListResponse:
        fundings, total = self.fundings.paginate(
            {},
            sort=[("fundedAt", DESCENDING)],
            skip=(page - 1) * limit,
            limit=limit,
        )
        return FundingListResponse(
            total=total,
            page=page,
            limit=limit,
            items=[_serialize_funding(f) for f in fundings],
        )

    def total(self) -> FundingTotalResponse:
        return FundingTotalResponse(total=self.fundings.total_amount())

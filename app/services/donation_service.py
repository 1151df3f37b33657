import logging
from typing import Any, Dict, Optional

from pymongo.database import Database

from app.core.errors import NotFound
from app.dtos import (
    DeleteResult,
    DonationRequestCreate,
    DonationRequestEdit,
    DonationRequestListResponse,
    DonationRequestResponse,
    MutationResult,
)
from app.middleware.auth import ensure_owner_or_admin
from app.models.entities.donation_request import (
    DonationRequest,
    DonationStatus,
    DonorInfo,
)
from app.models.entities.user import User
from app.repositories.donation_request import NEWEST_FIRST, DonationRequestRepository
from ventech_common.models.base import utcnow

logger = logging.getLogger(__name__)


def _serialize_request(request: DonationRequest) -> DonationRequestResponse:
    return DonationRequestResponse.model_validate(request.model_dump(by_alias=True))


class DonationRequestService:
    def __init__(self, db: Database):
        self.db = db
        self.requests = DonationRequestRepository(db)

    def _get(self, request_id: str) -> DonationRequest:
        request = self.requests.find_by_id(request_id)
        if request is None:
            raise NotFound("Donation request not found")
        return request

    def _get_owned(self, request_id: str, user: User) -> DonationRequest:
        request = self._get(request_id)
        ensure_owner_or_admin(request.requester_id, user)
        return request

    def create_request(
        self, user: User, payload: DonationRequestCreate
    ) -> DonationRequestResponse:
        request = DonationRequest(
            **payload.model_dump(),
            requester_id=user.id,
            requester_name=user.name,
            requester_email=user.email,
        )
        created = self.requests.insert_one(request)
        logger.info("Donation request created", extra={"request_id": str(created.id)})
        return _serialize_request(created)

    def _page(
        self, query: Dict[str, Any], page: int, limit: int
    ) -> DonationRequestListResponse:
        items, total = self.requests.paginate(
            query, sort=NEWEST_FIRST, skip=(page - 1) * limit, limit=limit
        )
        return DonationRequestListResponse(
            total=total,
            page=page,
            limit=limit,
            items=[_serialize_request(r) for r in items],
        )

    def list_requests(
        self, status: Optional[DonationStatus] = None, page: int = 1, limit: int = 20
    ) -> DonationRequestListResponse:
        query: Dict[str, Any] = {}
        if status:
            query["donationStatus"] = DonationStatus(status).value
        return self._page(query, page, limit)

    def list_for_requester(
        self,
        user: User,
        status: Optional[DonationStatus] = None,
        page: int = 1,
        limit: int = 20,
    ) -> DonationRequestListResponse:
        query: Dict[str, Any] = {"requesterId": user.id}
        if status:
            query["donationStatus"] = DonationStatus(status).value
        return self._page(query, page, limit)

    def get_request(self, request_id: str) -> DonationRequestResponse:
        return _serialize_request(self._get(request_id))

    def respond(self, request_id: str, donor: User) -> MutationResult:
        """Claim a pending request for ``donor``; anything not pending is left alone."""
        request = self._get(request_id)
        donor_info = DonorInfo(name=donor.name, email=donor.email)
        result = self.requests.update_where(
            {"_id": request.id, "donationStatus": DonationStatus.PENDING.value},
            {
                "$set": {
                    "donationStatus": DonationStatus.IN_PROGRESS.value,
                    "donorInfo": donor_info.model_dump(by_alias=True),
                    "updatedAt": utcnow(),
                }
            },
        )
        if result.modified_count:
            logger.info(
                "Donor responded to request",
                extra={"request_id": request_id, "donor_email": donor.email},
            )
        return MutationResult.from_result(result)

    def set_status(
        self, request_id: str, user: User, status: DonationStatus
    ) -> MutationResult:
        request = self._get_owned(request_id, user)
        result = self.requests.update_where(
            {"_id": request.id},
            {"$set": {"donationStatus": DonationStatus(status).value}},
        )
        return MutationResult.from_result(result)

    def edit_request(
        self, request_id: str, user: User, payload: DonationRequestEdit
    ) -> DonationRequestResponse:
        request = self._get_owned(request_id, user)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
        if not changes:
            return _serialize_request(request)
        updated = self.requests.find_one_and_update(
            {"_id": request.id}, {"$set": {**changes, "updatedAt": utcnow()}}
        )
        if updated is None:
            raise NotFound("Donation request not found")
        return _serialize_request(updated)

    def delete_request(self, request_id: str, user: User) -> DeleteResult:
        request = self._get_owned(request_id, user)
        result = self.requests.delete_where({"_id": request.id})
        logger.info("Donation request deleted", extra={"request_id": request_id})
        return DeleteResult.from_result(result)

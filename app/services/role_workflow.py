"""Merchant role request workflow and direct admin grants.

``roleRequest`` records the approval workflow; ``role`` and ``status`` are
the authoritative grants. Request status moves ``None -> pending`` and from
``pending`` to either ``approved`` or ``rejected``; both resolutions accept a
fresh request.

Each transition is computed from the stored user, then written with a filter
on the state it was computed from, so a concurrent approve and reject cannot
both succeed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from app.core.errors import Conflict, NoSuchRequest, NotFound
from app.dtos.base import MutationResult
from app.dtos.user import ShopRequest
from app.models.entities.user import (
    AccountStatus,
    Role,
    RoleRequest,
    RoleRequestStatus,
    User,
)
from app.repositories.user import UserRepository
from ventech_common.models.base import utcnow

logger = logging.getLogger(__name__)


def merchant_request_fields(
    user: User, shop_request: Optional[ShopRequest] = None
) -> Dict[str, Any]:
    """Fields written when ``user`` asks for the merchant role."""
    if user.role_request is not None and user.role_request.is_pending:
        raise Conflict("Merchant request already pending")

    request = RoleRequest(
        type=Role.MERCHANT,
        status=RoleRequestStatus.PENDING,
        requested_at=utcnow(),
    )
    fields: Dict[str, Any] = {"roleRequest": request.model_dump(by_alias=True)}
    # A blocked account stays blocked until an admin lifts it
    if user.status != AccountStatus.BLOCKED:
        fields["status"] = AccountStatus.ACTIVE.value
    if shop_request is not None and shop_request.shop_details is not None:
        fields["shopDetails"] = shop_request.shop_details.model_dump(by_alias=True)
    return fields


def _require_pending_merchant_request(user: User) -> None:
    request = user.role_request
    if request is None or request.type != Role.MERCHANT:
        raise NoSuchRequest()
    if not request.is_pending:
        raise Conflict(f"Merchant request already {request.status}")


def approval_fields(user: User) -> Dict[str, Any]:
    _require_pending_merchant_request(user)
    fields: Dict[str, Any] = {
        "roleRequest.status": RoleRequestStatus.APPROVED.value,
        "role": Role.MERCHANT.value,
    }
    if user.status == AccountStatus.PENDING:
        fields["status"] = AccountStatus.ACTIVE.value
    return fields


def rejection_fields(user: User) -> Dict[str, Any]:
    _require_pending_merchant_request(user)
    return {
        "roleRequest.status": RoleRequestStatus.REJECTED.value,
        "role": Role.CUSTOMER.value,
    }


class RoleWorkflowService:
    def __init__(self, db: Database):
        self.users = UserRepository(db)

    def _get_user(self, user_id: str) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def _apply(self, user: User, expected: Dict[str, Any], fields: Dict[str, Any]) -> User:
        updated = self.users.transition(user.id, expected, fields)
        if updated is None:
            # Someone else moved the request between our read and write
            raise Conflict("Role request changed concurrently, retry")
        return updated

    def request_merchant(
        self, user: User, shop_request: Optional[ShopRequest] = None
    ) -> User:
        current = self._get_user(user.id)
        fields = merchant_request_fields(current, shop_request)
        updated = self._apply(
            current,
            {
                "roleRequest.status": {"$ne": RoleRequestStatus.PENDING.value},
                "status": current.status,
            },
            fields,
        )
        logger.info("Merchant role requested", extra={"user_email": current.email})
        return updated

    def approve_merchant(self, user_id: str) -> User:
        user = self._get_user(user_id)
        fields = approval_fields(user)
        updated = self._apply(
            user,
            {
                "roleRequest.type": Role.MERCHANT.value,
                "roleRequest.status": RoleRequestStatus.PENDING.value,
                "status": user.status,
            },
            fields,
        )
        logger.info("Merchant request approved", extra={"user_email": user.email})
        return updated

    def reject_merchant(self, user_id: str) -> User:
        user = self._get_user(user_id)
        fields = rejection_fields(user)
        updated = self._apply(
            user,
            {
                "roleRequest.type": Role.MERCHANT.value,
                "roleRequest.status": RoleRequestStatus.PENDING.value,
            },
            fields,
        )
        logger.info("Merchant request rejected", extra={"user_email": user.email})
        return updated

    def list_pending_merchants(self) -> List[User]:
        return self.users.list_pending_role_requests(Role.MERCHANT)

    def set_role(self, user_id: str, role: Role) -> MutationResult:
        return self._set_field(user_id, "role", Role(role).value)

    def set_status(self, user_id: str, status: AccountStatus) -> MutationResult:
        return self._set_field(user_id, "status", AccountStatus(status).value)

    def _set_field(self, user_id: str, field: str, value: str) -> MutationResult:
        user = self._get_user(user_id)
        result = self.users.set_fields(user.id, {field: value})
        logger.info(
            "User %s set by admin",
            field,
            extra={"user_email": user.email, "value": value},
        )
        return MutationResult.from_result(result)

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from app.core.errors import NotFound, ValidationFailed
from app.core.validation import Violation
from app.dtos import (
    AddUserRequest,
    DonorResponse,
    UpdateProfileRequest,
    UserListResponse,
    UserResponse,
)
from app.models.entities.user import AccountStatus, Role, User
from app.repositories.user import UserRepository

logger = logging.getLogger(__name__)

POSITIVE_MARKER = "p"

PROFILE_FIELDS = {
    "name",
    "phone",
    "photo_url",
    "blood_group",
    "district",
    "upazila",
    "shop_details",
}


def serialize_user(user: User) -> UserResponse:
    return UserResponse.model_validate(user.model_dump(by_alias=True))


def normalize_blood_group(encoded: str) -> str:
    """Decode a blood group whose Rh sign travels as a trailing marker.

    ``+`` does not survive query strings, so clients send ``Ap`` for ``A+``
    and any other trailing character (``Om``) for the negative sign.
    """
    if not encoded or len(encoded) < 2:
        raise ValidationFailed(
            [Violation(path="bloodGroup", message="Invalid blood group")]
        )
    group, marker = encoded[:-1], encoded[-1]
    sign = "+" if marker == POSITIVE_MARKER else "-"
    return f"{group}{sign}"


def _profile_update(payload: Any) -> Dict[str, Any]:
    data = payload.model_dump(include=PROFILE_FIELDS, exclude_unset=True, by_alias=True)
    return {key: value for key, value in data.items() if value is not None}


class UserService:
    def __init__(self, db: Database):
        self.db = db
        self.users = UserRepository(db)

    def add_user(self, payload: AddUserRequest) -> UserResponse:
        """Register or refresh a profile without touching an existing account's grants."""
        profile = _profile_update(payload)
        on_insert = {
            "role": payload.role,
            "status": AccountStatus.ACTIVE.value,
            "loginCount": 0,
            "roleRequest": None,
        }
        if "name" not in profile:
            on_insert["name"] = payload.email.split("@")[0]
        user = self.users.upsert_profile(payload.email, profile, on_insert)
        logger.info("User upserted", extra={"user_email": user.email})
        return serialize_user(user)

    def update_profile(self, user: User, payload: UpdateProfileRequest) -> UserResponse:
        profile = _profile_update(payload)
        if not profile:
            return serialize_user(user)
        updated = self.users.update_profile(user.id, profile)
        if updated is None:
            raise NotFound("User not found")
        return serialize_user(updated)

    def list_users(
        self,
        role: Optional[Role] = None,
        status: Optional[AccountStatus] = None,
        page: int = 1,
        limit: int = 20,
    ) -> UserListResponse:
        filters: Dict[str, Any] = {}
        if role:
            filters["role"] = Role(role).value
        if status:
            filters["status"] = AccountStatus(status).value
        users, total = self.users.list_non_admins(
            filters, skip=(page - 1) * limit, limit=limit
        )
        return UserListResponse(
            total=total,
            page=page,
            limit=limit,
            items=[serialize_user(u) for u in users],
        )

    def delete_user(self, user_id: str) -> None:
        if not self.users.delete(user_id):
            raise NotFound("User not found")
        logger.info("User deleted", extra={"user_id": user_id})

    def search_donors(
        self,
        blood_group: Optional[str] = None,
        district: Optional[str] = None,
        upazila: Optional[str] = None,
    ) -> List[DonorResponse]:
        query: Dict[str, Any] = {
            "role": Role.DONOR.value,
            "status": AccountStatus.ACTIVE.value,
        }
        if blood_group:
            query["bloodGroup"] = normalize_blood_group(blood_group)
        if district:
            query["district"] = district
        if upazila:
            query["upazila"] = upazila
        return [
            DonorResponse.model_validate(u.model_dump(by_alias=True))
            for u in self.users.search(query)
        ]

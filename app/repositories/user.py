"""Repository for user accounts."""

from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.results import UpdateResult

from app.models.entities.user import AccountStatus, Role, RoleRequestStatus, User
from ventech_common.models.base import utcnow
from ventech_common.repositories.base import BaseRepository, CollectionName


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.USERS, User)

    def ensure_indexes(self) -> None:
        self.collection.create_index("email", unique=True)
        self.collection.create_index(
            [("roleRequest.status", ASCENDING), ("roleRequest.requestedAt", DESCENDING)]
        )

    def record_login(self, email: str, name: Optional[str]) -> User:
        """Create the account on first sight, otherwise bump its login counter."""
        now = utcnow()
        return self.find_one_and_update(
            {"email": normalize_email(email)},
            {
                "$inc": {"loginCount": 1},
                "$set": {"updatedAt": now},
                "$setOnInsert": {
                    "name": name,
                    "role": Role.CUSTOMER.value,
                    "status": AccountStatus.ACTIVE.value,
                    "roleRequest": None,
                    "createdAt": now,
                },
            },
            upsert=True,
        )

    def upsert_profile(
        self,
        email: str,
        profile: Dict[str, Any],
        on_insert: Dict[str, Any],
    ) -> User:
        now = utcnow()
        return self.find_one_and_update(
            {"email": normalize_email(email)},
            {
                "$set": {**profile, "updatedAt": now},
                "$setOnInsert": {**on_insert, "createdAt": now},
            },
            upsert=True,
        )

    def update_profile(self, user_id: ObjectId, profile: Dict[str, Any]) -> Optional[User]:
        return self.find_one_and_update(
            {"_id": user_id},
            {"$set": {**profile, "updatedAt": utcnow()}},
        )

    def set_fields(self, user_id: ObjectId, fields: Dict[str, Any]) -> UpdateResult:
        return self.update_where({"_id": user_id}, {"$set": fields})

    def transition(
        self,
        user_id: ObjectId,
        expected: Dict[str, Any],
        fields: Dict[str, Any],
    ) -> Optional[User]:
        """Set ``fields`` only while the stored document still matches ``expected``."""
        return self.find_one_and_update(
            {"_id": user_id, **expected},
            {"$set": {**fields, "updatedAt": utcnow()}},
        )

    def list_non_admins(
        self,
        filters: Dict[str, Any],
        skip: int = 0,
        limit: int = 0,
    ) -> Tuple[List[User], int]:
        # Filters narrow the non-admin set; a role filter must not replace it
        query: Dict[str, Any] = {"$and": [{"role": {"$ne": Role.ADMIN.value}}, filters]}
        return self.paginate(
            query, sort=[("createdAt", DESCENDING)], skip=skip, limit=limit
        )

    def list_pending_role_requests(self, role: Role) -> List[User]:
        return self.find_many(
            {
                "roleRequest.type": role.value,
                "roleRequest.status": RoleRequestStatus.PENDING.value,
            },
            sort=[("roleRequest.requestedAt", DESCENDING)],
        )

    def search(self, filters: Dict[str, Any]) -> List[User]:
        return self.find_many(filters, sort=[("name", ASCENDING)])


__all__ = ["UserRepository", "normalize_email"]

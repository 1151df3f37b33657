"""Account administration: listing, deletion, role grants and merchant approvals."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.api.deps import AdminUser, Pagination, get_db
from app.dtos import (
    MessageResponse,
    MutationResult,
    RoleUpdateRequest,
    StatusUpdateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
)
from app.models.entities.user import AccountStatus, Role
from app.services.role_workflow import RoleWorkflowService
from app.services.user_service import UserService, serialize_user

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(AdminUser)])


@router.get("/users", response_model=UserListResponse)
def list_users(
    role: Optional[Role] = None,
    status: Optional[AccountStatus] = None,
    paging: Pagination = Depends(),
    db: Database = Depends(get_db),
):
    """List every non-admin account, newest first."""
    return UserService(db).list_users(
        role=role, status=status, page=paging.page, limit=paging.limit
    )


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(user_id: str, db: Database = Depends(get_db)):
    UserService(db).delete_user(user_id)
    return MessageResponse(message="User deleted successfully")


@router.get("/pending-merchants", response_model=List[UserResponse])
def pending_merchants(db: Database = Depends(get_db)):
    users = RoleWorkflowService(db).list_pending_merchants()
    return [serialize_user(u) for u in users]


@router.patch("/approve-merchant/{user_id}", response_model=UserEnvelope)
def approve_merchant(user_id: str, db: Database = Depends(get_db)):
    user = RoleWorkflowService(db).approve_merchant(user_id)
    return UserEnvelope(user=serialize_user(user), message="Merchant approved")


@router.patch("/reject-merchant/{user_id}", response_model=UserEnvelope)
def reject_merchant(user_id: str, db: Database = Depends(get_db)):
    user = RoleWorkflowService(db).reject_merchant(user_id)
    return UserEnvelope(user=serialize_user(user), message="Merchant request rejected")


@router.patch("/users/{user_id}/role", response_model=MutationResult)
def update_role(
    user_id: str, payload: RoleUpdateRequest, db: Database = Depends(get_db)
):
    return RoleWorkflowService(db).set_role(user_id, payload.role)


@router.patch("/users/{user_id}/status", response_model=MutationResult)
def update_status(
    user_id: str, payload: StatusUpdateRequest, db: Database = Depends(get_db)
):
    return RoleWorkflowService(db).set_status(user_id, payload.status)

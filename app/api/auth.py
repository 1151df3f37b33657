from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from pymongo.database import Database

from app.api.deps import CurrentUser, RequestContext, get_db
from app.dtos import AddUserRequest, ShopRequest, UpdateProfileRequest, UserEnvelope
from app.services.role_workflow import RoleWorkflowService
from app.services.user_service import UserService, serialize_user

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/add-user",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def add_user(payload: AddUserRequest, db: Database = Depends(get_db)):
    """Create the account for an email, or refresh its profile fields."""
    user = UserService(db).add_user(payload)
    return UserEnvelope(user=user, message="User created or updated successfully")


@router.get("/me", response_model=UserEnvelope)
def get_me(ctx: RequestContext = Depends(CurrentUser)):
    return UserEnvelope(user=serialize_user(ctx.user))


@router.patch("/update-profile", response_model=UserEnvelope)
def update_profile(
    payload: UpdateProfileRequest,
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    user = UserService(db).update_profile(ctx.user, payload)
    return UserEnvelope(user=user, message="Profile updated")


@router.post("/request-merchant", response_model=UserEnvelope)
def request_merchant(
    payload: Optional[ShopRequest] = Body(default=None),
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    user = RoleWorkflowService(db).request_merchant(ctx.user, payload)
    return UserEnvelope(user=serialize_user(user), message="Request sent successfully")

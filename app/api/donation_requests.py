from typing import Optional

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.api.deps import ActiveUser, CurrentUser, Pagination, RequestContext, get_db
from app.dtos import (
    DeleteResult,
    DonationRequestCreate,
    DonationRequestEdit,
    DonationRequestListResponse,
    DonationRequestResponse,
    DonationStatusUpdate,
    MutationResult,
)
from app.models.entities.donation_request import DonationStatus
from app.services.donation_service import DonationRequestService

router = APIRouter(prefix="/donation-requests", tags=["Donation Requests"])


@router.post(
    "", response_model=DonationRequestResponse, status_code=status.HTTP_201_CREATED
)
def create_request(
    payload: DonationRequestCreate,
    ctx: RequestContext = Depends(ActiveUser),
    db: Database = Depends(get_db),
):
    return DonationRequestService(db).create_request(ctx.user, payload)


@router.get("", response_model=DonationRequestListResponse)
def list_requests(
    status: Optional[DonationStatus] = None,
    paging: Pagination = Depends(),
    db: Database = Depends(get_db),
):
    return DonationRequestService(db).list_requests(
        status=status, page=paging.page, limit=paging.limit
    )


@router.get("/mine", response_model=DonationRequestListResponse)
def my_requests(
    status: Optional[DonationStatus] = None,
    paging: Pagination = Depends(),
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    return DonationRequestService(db).list_for_requester(
        ctx.user, status=status, page=paging.page, limit=paging.limit
    )


@router.get("/{request_id}", response_model=DonationRequestResponse)
def get_request(request_id: str, db: Database = Depends(get_db)):
    return DonationRequestService(db).get_request(request_id)


@router.patch("/{request_id}/respond", response_model=MutationResult)
def respond(
    request_id: str,
    ctx: RequestContext = Depends(ActiveUser),
    db: Database = Depends(get_db),
):
    """Volunteer as donor; only pending requests can be claimed."""
    return DonationRequestService(db).respond(request_id, ctx.user)


@router.patch("/{request_id}/status", response_model=MutationResult)
def update_status(
    request_id: str,
    payload: DonationStatusUpdate,
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    return DonationRequestService(db).set_status(request_id, ctx.user, payload.status)


@router.patch("/{request_id}/edit", response_model=DonationRequestResponse)
def edit_request(
    request_id: str,
    payload: DonationRequestEdit,
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    return DonationRequestService(db).edit_request(request_id, ctx.user, payload)


@router.delete("/{request_id}", response_model=DeleteResult)
def delete_request(
    request_id: str,
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    return DonationRequestService(db).delete_request(request_id, ctx.user)

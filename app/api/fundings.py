from fastapi import APIRouter, Depends, Request, status
from pymongo.database import Database

from app.api.deps import CurrentUser, Pagination, RequestContext, get_db
from app.dtos import (
    FundingCreateRequest,
    FundingListResponse,
    FundingResponse,
    FundingTotalResponse,
    PaymentIntentRequest,
    PaymentIntentResponse,
)
from app.services.funding_service import FundingService
from app.services.payments import PaymentGateway

router = APIRouter(tags=["Fundings"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(payload: PaymentIntentRequest, request: Request):
    gateway: PaymentGateway = request.app.state.payment_gateway
    return PaymentIntentResponse(client_secret=gateway.create_intent(payload.price))


@router.post(
    "/fundings", response_model=FundingResponse, status_code=status.HTTP_201_CREATED
)
def record_funding(
    payload: FundingCreateRequest,
    ctx: RequestContext = Depends(CurrentUser),
    db: Database = Depends(get_db),
):
    return FundingService(db).record_funding(ctx.user, payload)


@router.get(
    "/fundings",
    response_model=FundingListResponse,
    dependencies=[Depends(CurrentUser)],
)
def list_fundings(paging: Pagination = Depends(), db: Database = Depends(get_db)):
    return FundingService(db).list_fundings(page=paging.page, limit=paging.limit)


@router.get("/fundings/total", response_model=FundingTotalResponse)
def funding_total(db: Database = Depends(get_db)):
    return FundingService(db).total()

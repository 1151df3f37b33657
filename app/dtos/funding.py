from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.dtos.base import BaseResponse
from ventech_common.models.base import MongoModel, PyObjectIdStr


class FundingCreateRequest(MongoModel):
    amount: float = Field(..., gt=0)
    transaction_id: Optional[str] = None


class FundingResponse(BaseResponse):
    amount: float
    transaction_id: Optional[str] = None
    funded_at: datetime
    funder_id: PyObjectIdStr
    funder_name: Optional[str] = None
    funder_email: str


class FundingListResponse(MongoModel):
    total: int
    page: int
    limit: int
    items: List[FundingResponse]


class FundingTotalResponse(MongoModel):
    total: float


class PaymentIntentRequest(MongoModel):
    price: float = Field(..., gt=0)


class PaymentIntentResponse(MongoModel):
    client_secret: str

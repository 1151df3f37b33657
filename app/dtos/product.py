"""Product DTOs"""

from typing import List, Literal, Optional

from pydantic import Field

from app.dtos.base import BaseResponse
from ventech_common.models.base import MongoModel, PyObjectIdStr


class ProductCreateRequest(MongoModel):
    name: str = Field(..., min_length=2)
    description: Optional[str] = None
    category: Optional[str] = None
    price: float = Field(..., gt=0)
    stock: int = Field(default=0, ge=0)
    images: List[str] = Field(default_factory=list)


class ProductEditRequest(MongoModel):
    name: Optional[str] = Field(default=None, min_length=2)
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    images: Optional[List[str]] = None


class StockUpdateRequest(MongoModel):
    stock: int = Field(..., ge=0)


ProductSort = Literal["newest", "price_asc", "price_desc"]


class ProductResponse(BaseResponse):
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: float
    stock: int
    in_stock: bool
    images: List[str] = []
    merchant_id: PyObjectIdStr
    merchant_email: str


class ProductListResponse(MongoModel):
    total: int
    page: int
    limit: int
    items: List[ProductResponse]

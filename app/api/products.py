from typing import Optional

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.api.deps import ActiveMerchant, MerchantOrAdmin, Pagination, RequestContext, get_db
from app.dtos import (
    DeleteResult,
    MutationResult,
    ProductCreateRequest,
    ProductEditRequest,
    ProductListResponse,
    ProductResponse,
    ProductSort,
    StockUpdateRequest,
)
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreateRequest,
    ctx: RequestContext = Depends(ActiveMerchant),
    db: Database = Depends(get_db),
):
    return ProductService(db).create_product(ctx.user, payload)


@router.get("", response_model=ProductListResponse)
def list_products(
    category: Optional[str] = None,
    merchant_id: Optional[str] = None,
    search: Optional[str] = None,
    sort: ProductSort = "newest",
    paging: Pagination = Depends(),
    db: Database = Depends(get_db),
):
    return ProductService(db).list_products(
        category=category,
        merchant_id=merchant_id,
        search=search,
        sort=sort,
        page=paging.page,
        limit=paging.limit,
    )


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, db: Database = Depends(get_db)):
    return ProductService(db).get_product(product_id)


@router.patch("/{product_id}/update-stock", response_model=MutationResult)
def update_stock(
    product_id: str,
    payload: StockUpdateRequest,
    ctx: RequestContext = Depends(MerchantOrAdmin),
    db: Database = Depends(get_db),
):
    return ProductService(db).update_stock(product_id, ctx.user, payload.stock)


@router.patch("/{product_id}/stock-out", response_model=MutationResult)
def stock_out(
    product_id: str,
    ctx: RequestContext = Depends(MerchantOrAdmin),
    db: Database = Depends(get_db),
):
    return ProductService(db).stock_out(product_id, ctx.user)


@router.patch("/{product_id}/edit", response_model=ProductResponse)
def edit_product(
    product_id: str,
    payload: ProductEditRequest,
    ctx: RequestContext = Depends(MerchantOrAdmin),
    db: Database = Depends(get_db),
):
    return ProductService(db).edit_product(product_id, ctx.user, payload)


@router.delete("/{product_id}", response_model=DeleteResult)
def delete_product(
    product_id: str,
    ctx: RequestContext = Depends(MerchantOrAdmin),
    db: Database = Depends(get_db),
):
    return ProductService(db).delete_product(product_id, ctx.user)

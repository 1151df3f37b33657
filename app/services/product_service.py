import logging
import re
from typing import Any, Dict, Optional

from pymongo.database import Database

from app.core.errors import NotFound
from app.dtos import (
    DeleteResult,
    MutationResult,
    ProductCreateRequest,
    ProductEditRequest,
    ProductListResponse,
    ProductResponse,
)
from app.middleware.auth import ensure_owner_or_admin
from app.models.entities.product import Product
from app.models.entities.user import User
from app.repositories.product import ProductRepository
from ventech_common.models.base import utcnow
from ventech_common.repositories.base import to_object_id

logger = logging.getLogger(__name__)


def _serialize_product(product: Product) -> ProductResponse:
    return ProductResponse.model_validate(product.model_dump(by_alias=True))


class ProductService:
    def __init__(self, db: Database):
        self.db = db
        self.products = ProductRepository(db)

    def _get_owned(self, product_id: str, user: User) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFound("Product not found")
        ensure_owner_or_admin(product.merchant_id, user)
        return product

    def create_product(self, user: User, payload: ProductCreateRequest) -> ProductResponse:
        product = Product(
            **payload.model_dump(),
            in_stock=payload.stock > 0,
            merchant_id=user.id,
            merchant_email=user.email,
        )
        created = self.products.insert_one(product)
        logger.info("Product created", extra={"product_id": str(created.id)})
        return _serialize_product(created)

    def list_products(
        self,
        category: Optional[str] = None,
        merchant_id: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> ProductListResponse:
        query: Dict[str, Any] = {}
        if category:
            query["category"] = category
        if merchant_id:
            identifier = to_object_id(merchant_id)
            if identifier is None:
                return ProductListResponse(total=0, page=page, limit=limit, items=[])
            query["merchantId"] = identifier
        if search:
            query["name"] = {"$regex": re.escape(search), "$options": "i"}

        products, total = self.products.list_products(
            query, sort=sort, skip=(page - 1) * limit, limit=limit
        )
        return ProductListResponse(
            total=total,
            page=page,
            limit=limit,
            items=[_serialize_product(p) for p in products],
        )

    def get_product(self, product_id: str) -> ProductResponse:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFound("Product not found")
        return _serialize_product(product)

    def update_stock(self, product_id: str, user: User, stock: int) -> MutationResult:
        product = self._get_owned(product_id, user)
        result = self.products.update_where(
            {"_id": product.id},
            {"$set": {"stock": stock, "inStock": stock > 0, "updatedAt": utcnow()}},
        )
        return MutationResult.from_result(result)

    def stock_out(self, product_id: str, user: User) -> MutationResult:
        product = self._get_owned(product_id, user)
        result = self.products.update_where(
            {"_id": product.id, "inStock": True},
            {"$set": {"stock": 0, "inStock": False, "updatedAt": utcnow()}},
        )
        return MutationResult.from_result(result)

    def edit_product(
        self, product_id: str, user: User, payload: ProductEditRequest
    ) -> ProductResponse:
        product = self._get_owned(product_id, user)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
        if not changes:
            return _serialize_product(product)
        updated = self.products.find_one_and_update(
            {"_id": product.id}, {"$set": {**changes, "updatedAt": utcnow()}}
        )
        if updated is None:
            raise NotFound("Product not found")
        return _serialize_product(updated)

    def delete_product(self, product_id: str, user: User) -> DeleteResult:
        product = self._get_owned(product_id, user)
        result = self.products.delete_where({"_id": product.id})
        logger.info("Product deleted", extra={"product_id": product_id})
        return DeleteResult.from_result(result)

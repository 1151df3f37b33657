"""Repository for marketplace products."""

from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database

from app.models.entities.product import Product
from ventech_common.repositories.base import BaseRepository, CollectionName

SORT_ORDERS = {
    "newest": [("createdAt", DESCENDING)],
    "price_asc": [("price", ASCENDING)],
    "price_desc": [("price", DESCENDING)],
}


class ProductRepository(BaseRepository[Product]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.PRODUCTS, Product)

    def ensure_indexes(self) -> None:
        self.collection.create_index("merchantId")
        self.collection.create_index("category")

    def list_products(
        self,
        query: Dict[str, Any],
        sort: Optional[str] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> Tuple[List[Product], int]:
        order = SORT_ORDERS.get(sort or "newest", SORT_ORDERS["newest"])
        return self.paginate(query, sort=order, skip=skip, limit=limit)

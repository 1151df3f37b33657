"""Product entity - an item listed by a merchant"""

from typing import List, Optional

from ventech_common.models.base import BaseEntity, PyObjectId


class Product(BaseEntity):
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: float
    stock: int = 0
    in_stock: bool = False
    images: List[str] = []

    merchant_id: PyObjectId
    merchant_email: str

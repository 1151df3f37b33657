from datetime import datetime
from typing import Optional

from pydantic import Field

from ventech_common.models.base import BaseEntity, PyObjectId, utcnow


class Funding(BaseEntity):
    amount: float
    transaction_id: Optional[str] = None
    funded_at: datetime = Field(default_factory=utcnow)

    funder_id: PyObjectId
    funder_name: Optional[str] = None
    funder_email: str

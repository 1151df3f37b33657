"""Public donor search."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from app.api.deps import get_db
from app.dtos import DonorResponse
from app.services.user_service import UserService

router = APIRouter(tags=["Donors"])


@router.get("/search-donors", response_model=List[DonorResponse])
def search_donors(
    blood_group: str = Query(..., alias="bloodGroup"),
    district: str = Query(...),
    upazila: str = Query(...),
    db: Database = Depends(get_db),
):
    """Exact search; ``bloodGroup`` ends in ``p`` for Rh-positive, anything else for negative."""
    return UserService(db).search_donors(blood_group, district, upazila)


@router.get("/search-donors-dynamic", response_model=List[DonorResponse])
def search_donors_dynamic(
    blood_group: Optional[str] = Query(None, alias="bloodGroup"),
    district: Optional[str] = None,
    upazila: Optional[str] = None,
    db: Database = Depends(get_db),
):
    return UserService(db).search_donors(blood_group, district, upazila)

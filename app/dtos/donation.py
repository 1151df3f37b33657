"""Donation request DTOs"""

from typing import List, Literal, Optional

from pydantic import Field

from app.dtos.base import BaseResponse
from app.models.entities.donation_request import DonationStatus
from ventech_common.models.base import MongoModel, PyObjectIdStr


class DonationRequestCreate(MongoModel):
    recipient_name: str = Field(..., min_length=2)
    blood_group: str = Field(..., min_length=2, max_length=3)
    district: str
    upazila: str
    hospital_name: str
    full_address: str
    donation_date: str
    donation_time: str
    message: Optional[str] = None
    donation_status: Literal["pending"] = "pending"


class DonationRequestEdit(MongoModel):
    recipient_name: Optional[str] = Field(default=None, min_length=2)
    blood_group: Optional[str] = Field(default=None, min_length=2, max_length=3)
    district: Optional[str] = None
    upazila: Optional[str] = None
    hospital_name: Optional[str] = None
    full_address: Optional[str] = None
    donation_date: Optional[str] = None
    donation_time: Optional[str] = None
    message: Optional[str] = None


class DonationStatusUpdate(MongoModel):
    status: Literal["done", "canceled"]


class DonorInfoOut(MongoModel):
    name: Optional[str] = None
    email: str


class DonationRequestResponse(BaseResponse):
    requester_id: PyObjectIdStr
    requester_name: Optional[str] = None
    requester_email: str
    recipient_name: str
    blood_group: str
    district: str
    upazila: str
    hospital_name: str
    full_address: str
    donation_date: str
    donation_time: str
    message: Optional[str] = None
    donation_status: DonationStatus
    donor_info: Optional[DonorInfoOut] = None


class DonationRequestListResponse(MongoModel):
    total: int
    page: int
    limit: int
    items: List[DonationRequestResponse]

"""Donation request entity - a call for blood donors"""

from enum import Enum
from typing import Optional

from ventech_common.models.base import BaseEntity, MongoModel, PyObjectId


class DonationStatus(str, Enum):

    PENDING = "pending"
    IN_PROGRESS = "inprogress"
    DONE = "done"
    CANCELED = "canceled"


class DonorInfo(MongoModel):
    name: Optional[str] = None
    email: str


class DonationRequest(BaseEntity):
    requester_id: PyObjectId
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

    donation_status: DonationStatus = DonationStatus.PENDING
    donor_info: Optional[DonorInfo] = None

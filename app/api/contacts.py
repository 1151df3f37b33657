from typing import List

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.api.deps import AdminUser, get_db
from app.dtos import ContactCreatedResponse, ContactCreateRequest, ContactResponse
from app.services.contact_service import ContactService

router = APIRouter(prefix="/contacts", tags=["Contacts"])


@router.post(
    "", response_model=ContactCreatedResponse, status_code=status.HTTP_201_CREATED
)
def submit_message(payload: ContactCreateRequest, db: Database = Depends(get_db)):
    return ContactService(db).submit(payload)


@router.get(
    "", response_model=List[ContactResponse], dependencies=[Depends(AdminUser)]
)
def list_messages(db: Database = Depends(get_db)):
    return ContactService(db).list_messages()

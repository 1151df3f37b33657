import logging
from typing import List

from pymongo import DESCENDING
from pymongo.database import Database

from app.dtos import ContactCreatedResponse, ContactCreateRequest, ContactResponse
from app.models.entities.contact import ContactMessage
from app.repositories.contact import ContactRepository

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, db: Database):
        self.db = db
        self.contacts = ContactRepository(db)

    def submit(self, payload: ContactCreateRequest) -> ContactCreatedResponse:
        created = self.contacts.insert_one(ContactMessage(**payload.model_dump()))
        logger.info("Contact message saved", extra={"contact_id": str(created.id)})
        return ContactCreatedResponse(message="Message saved successfully", id=created.id)

    def list_messages(self) -> List[ContactResponse]:
        messages = self.contacts.find_many({}, sort=[("createdAt", DESCENDING)])
        return [
            ContactResponse.model_validate(m.model_dump(by_alias=True)) for m in messages
        ]

"""Repository for contact form messages (the mailbox)."""

from pymongo.database import Database

from app.models.entities.contact import ContactMessage
from ventech_common.repositories.base import BaseRepository, CollectionName


class ContactRepository(BaseRepository[ContactMessage]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.CONTACTS, ContactMessage)

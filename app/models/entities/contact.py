from ventech_common.models.base import BaseEntity


class ContactMessage(BaseEntity):
    name: str
    email: str
    subject: str
    message: str

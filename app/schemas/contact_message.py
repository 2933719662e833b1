"""Contact form message ODM schema."""

from enum import Enum

from .base import RecordDocument


class MessageStatus(str, Enum):
    NEW = "new"
    READ = "read"
    RESPONDED = "responded"


class ContactMessage(RecordDocument):
    name: str
    email: str
    subject: str
    message: str
    status: MessageStatus = MessageStatus.NEW

    class Settings:
        name = "contact_message"

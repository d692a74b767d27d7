from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ClerkEventType(str, Enum):
    USER_CREATED = "user.created"
    USER_UPDATED = "user.updated"
    USER_DELETED = "user.deleted"

    @classmethod
    def from_value(cls, value: str) -> Optional["ClerkEventType"]:
        """Return the matching event type, or None for events this service does not handle."""
        try:
            return cls(value)
        except ValueError:
            return None


class ClerkWebhookEvent(BaseModel):
    type: str
    data: Dict[str, Any] = Field(default_factory=dict)
    object: Optional[str] = None


class ClerkEmailAddress(BaseModel):
    email_address: str
    id: Optional[str] = None


class ClerkUserData(BaseModel):
    """Payload of user.created and user.updated (only the fields we mirror)."""

    id: str = Field(..., min_length=1, max_length=64)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_addresses: List[ClerkEmailAddress] = Field(default_factory=list)
    image_url: Optional[str] = None

    @property
    def full_name(self) -> Optional[str]:
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else None

    @property
    def email(self) -> Optional[str]:
        if not self.email_addresses:
            return None
        return self.email_addresses[0].email_address


class ClerkDeletedUserData(BaseModel):
    """Payload of user.deleted. Clerk only sends the id."""

    id: str = Field(..., min_length=1, max_length=64)
    deleted: Optional[bool] = None

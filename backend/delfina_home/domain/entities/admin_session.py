"""Domain entities for admin authentication."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class AuthEvent(str, Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


@dataclass
class AdminSession:
    """An authenticated admin session, identified by ``id`` inside its token."""

    id: str
    email: str
    access_token: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(timezone.utc)) >= self.expires_at

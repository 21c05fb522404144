"""Domain models for confirmations and blessings."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ConfirmationRecord:
    """Attendance confirmation, one per user."""

    user_id: str
    full_name: str
    guests_count: int
    updated_at: datetime | None = None


@dataclass(frozen=True)
class WellWishRecord:
    """A blessing left by a guest."""

    id: str
    user_id: str
    message: str
    created_at: datetime | None = None

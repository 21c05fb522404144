"""Persistence gateway for confirmations and blessings."""

import logging
from dataclasses import dataclass
from typing import Protocol

from wedding_bot.domain.errors import PersistenceError
from wedding_bot.domain.rsvp import ConfirmationRecord, WellWishRecord

logger = logging.getLogger(__name__)


class ConfirmationRepository(Protocol):
    """Persistence interface for attendance confirmations."""

    def get_confirmation(self, user_id: str) -> ConfirmationRecord | None:
        """Return the user's confirmation, if present."""

    def upsert_confirmation(
        self, user_id: str, full_name: str, guests_count: int
    ) -> ConfirmationRecord:
        """Insert or overwrite the user's confirmation and return it."""

    def list_confirmations(self, limit: int) -> list[ConfirmationRecord]:
        """Return up to ``limit`` confirmations."""


class WellWishRepository(Protocol):
    """Persistence interface for blessings."""

    def create_well_wish(self, user_id: str, message: str) -> WellWishRecord:
        """Append a blessing and return it."""

    def list_well_wishes(self, user_id: str) -> list[WellWishRecord]:
        """Return the user's blessings, oldest first."""


@dataclass
class RsvpService:
    """Commit completed flow results to durable storage.

    Repository failures of any kind are logged and re-raised as
    :class:`PersistenceError` so callers can keep the session intact.
    """

    confirmation_repository: ConfirmationRepository
    well_wish_repository: WellWishRepository

    def get_confirmation(self, user_id: str) -> ConfirmationRecord | None:
        """Return the user's existing confirmation, if any."""
        try:
            return self.confirmation_repository.get_confirmation(user_id)
        except Exception as exc:
            logger.exception("Failed to load confirmation", extra={"user_id": user_id})
            raise PersistenceError("Failed to load confirmation") from exc

    def upsert_confirmation(
        self, user_id: str, full_name: str, guests_count: int
    ) -> ConfirmationRecord:
        """Save the user's confirmation, overwriting any previous one."""
        try:
            record = self.confirmation_repository.upsert_confirmation(
                user_id=user_id, full_name=full_name, guests_count=guests_count
            )
        except Exception as exc:
            logger.exception("Failed to save confirmation", extra={"user_id": user_id})
            raise PersistenceError("Failed to save confirmation") from exc
        logger.info(
            "Confirmation saved",
            extra={"user_id": user_id, "guests_count": record.guests_count},
        )
        return record

    def append_well_wish(self, user_id: str, message: str) -> WellWishRecord:
        """Store a new blessing for the user."""
        try:
            record = self.well_wish_repository.create_well_wish(
                user_id=user_id, message=message
            )
        except Exception as exc:
            logger.exception("Failed to save blessing", extra={"user_id": user_id})
            raise PersistenceError("Failed to save blessing") from exc
        logger.info("Blessing saved", extra={"user_id": user_id})
        return record

    def list_well_wishes(self, user_id: str) -> list[WellWishRecord]:
        """Return every blessing the user has left."""
        try:
            return self.well_wish_repository.list_well_wishes(user_id)
        except Exception as exc:
            logger.exception("Failed to load blessings", extra={"user_id": user_id})
            raise PersistenceError("Failed to load blessings") from exc

    def list_confirmations(self, limit: int = 5) -> list[ConfirmationRecord]:
        """Return a sample of stored confirmations."""
        try:
            return self.confirmation_repository.list_confirmations(limit)
        except Exception as exc:
            logger.exception("Failed to list confirmations")
            raise PersistenceError("Failed to list confirmations") from exc

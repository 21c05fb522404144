"""Supabase-backed confirmation repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from wedding_bot.adapters.supabase_client import require_client
from wedding_bot.domain.rsvp import ConfirmationRecord
from wedding_bot.services.rsvp import ConfirmationRepository

_COLUMNS = "user_id, full_name, guests_count, updated_at"


@dataclass
class SupabaseRsvpRepository(ConfirmationRepository):
    """Supabase implementation for the ``rsvps`` table."""

    client: Client | None

    def get_confirmation(self, user_id: str) -> ConfirmationRecord | None:
        """Return the confirmation row for a user, if present."""
        response = (
            require_client(self.client)
            .table("rsvps")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def upsert_confirmation(
        self, user_id: str, full_name: str, guests_count: int
    ) -> ConfirmationRecord:
        """Insert or overwrite the confirmation keyed by ``user_id``."""
        response = (
            require_client(self.client)
            .table("rsvps")
            .upsert(
                {
                    "user_id": user_id,
                    "full_name": full_name,
                    "guests_count": guests_count,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert confirmation")
        return _to_record(response.data[0])

    def list_confirmations(self, limit: int) -> list[ConfirmationRecord]:
        """Return up to ``limit`` confirmation rows."""
        response = (
            require_client(self.client)
            .table("rsvps")
            .select(_COLUMNS)
            .limit(limit)
            .execute()
        )
        return [_to_record(row) for row in response.data or []]


def _to_record(row: dict[str, object]) -> ConfirmationRecord:
    updated_at = row.get("updated_at")
    return ConfirmationRecord(
        user_id=str(row["user_id"]),
        full_name=str(row["full_name"]),
        guests_count=int(row["guests_count"]),
        updated_at=(
            datetime.fromisoformat(updated_at) if isinstance(updated_at, str) else None
        ),
    )

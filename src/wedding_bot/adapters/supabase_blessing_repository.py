"""Supabase-backed blessing repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from wedding_bot.adapters.supabase_client import require_client
from wedding_bot.domain.rsvp import WellWishRecord
from wedding_bot.services.rsvp import WellWishRepository

_COLUMNS = "id, user_id, message, created_at"


@dataclass
class SupabaseBlessingRepository(WellWishRepository):
    """Supabase implementation for the append-only ``blessings`` table."""

    client: Client | None

    def create_well_wish(self, user_id: str, message: str) -> WellWishRecord:
        """Insert a blessing row and return it."""
        response = (
            require_client(self.client)
            .table("blessings")
            .insert([{"user_id": user_id, "message": message}])
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to insert blessing")
        return _to_record(response.data[0])

    def list_well_wishes(self, user_id: str) -> list[WellWishRecord]:
        """Return a user's blessings in creation order."""
        response = (
            require_client(self.client)
            .table("blessings")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at")
            .execute()
        )
        return [_to_record(row) for row in response.data or []]


def _to_record(row: dict[str, object]) -> WellWishRecord:
    created_at = row.get("created_at")
    return WellWishRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        message=str(row["message"]),
        created_at=(
            datetime.fromisoformat(created_at) if isinstance(created_at, str) else None
        ),
    )

"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from wedding_bot.adapters.line_client import LineClient
from wedding_bot.config import Settings
from wedding_bot.containers import AppContainer
from wedding_bot.domain.rsvp import ConfirmationRecord, WellWishRecord
from wedding_bot.services.cards import CardRepository, CardService
from wedding_bot.services.commands import CommandRouter
from wedding_bot.services.conversation import ConversationService
from wedding_bot.services.events import LineEventHandler
from wedding_bot.services.rsvp import (
    ConfirmationRepository,
    RsvpService,
    WellWishRepository,
)
from wedding_bot.services.session_store import InMemorySessionStore


@dataclass
class InMemoryConfirmationRepository(ConfirmationRepository):
    """In-memory confirmation repository for tests."""

    records: dict[str, ConfirmationRecord] = field(default_factory=dict)
    fail: bool = False

    def get_confirmation(self, user_id: str) -> ConfirmationRecord | None:
        if self.fail:
            raise RuntimeError("store unavailable")
        return self.records.get(user_id)

    def upsert_confirmation(
        self, user_id: str, full_name: str, guests_count: int
    ) -> ConfirmationRecord:
        if self.fail:
            raise RuntimeError("store unavailable")
        record = ConfirmationRecord(
            user_id=user_id,
            full_name=full_name,
            guests_count=guests_count,
            updated_at=datetime.now(tz=UTC),
        )
        self.records[user_id] = record
        return record

    def list_confirmations(self, limit: int) -> list[ConfirmationRecord]:
        if self.fail:
            raise RuntimeError("store unavailable")
        return list(self.records.values())[:limit]


@dataclass
class InMemoryWellWishRepository(WellWishRepository):
    """In-memory blessing repository for tests."""

    records: list[WellWishRecord] = field(default_factory=list)
    fail: bool = False

    def create_well_wish(self, user_id: str, message: str) -> WellWishRecord:
        if self.fail:
            raise RuntimeError("store unavailable")
        record = WellWishRecord(
            id=str(uuid4()),
            user_id=user_id,
            message=message,
            created_at=datetime.now(tz=UTC),
        )
        self.records.append(record)
        return record

    def list_well_wishes(self, user_id: str) -> list[WellWishRecord]:
        return [record for record in self.records if record.user_id == user_id]


@dataclass
class StaticCardRepository(CardRepository):
    """Card repository serving cards from a dict."""

    cards: dict[str, dict[str, object]] = field(default_factory=dict)

    def load(self, name: str) -> dict[str, object]:
        if name not in self.cards:
            raise FileNotFoundError(name)
        return self.cards[name]


@dataclass
class FakeLineClient(LineClient):
    """Fake LINE client that records replies."""

    replies: list[tuple[str, list[dict[str, object]]]] = field(default_factory=list)
    fail: bool = False

    async def reply_message(
        self, reply_token: str, messages: list[dict[str, object]]
    ) -> None:
        if self.fail:
            raise RuntimeError("LINE API unavailable")
        self.replies.append((reply_token, messages))

    @property
    def texts(self) -> list[str]:
        return [
            str(message.get("text", ""))
            for _, messages in self.replies
            for message in messages
        ]


def _default_cards() -> dict[str, dict[str, object]]:
    return {
        "wedding_details.json": {"type": "bubble", "name": "wedding"},
        "travel.json": {"type": "bubble", "name": "travel"},
        "blessing.json": {"type": "bubble", "name": "blessing"},
        "confirm.json": {"type": "bubble", "name": "confirm"},
        "gift.json": {"type": "bubble", "name": "gift"},
    }


@pytest.fixture
def bare_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove credential env vars so Settings sees an empty environment."""
    for name in (
        "LINE_CHANNEL_SECRET",
        "LINE_CHANNEL_ACCESS_TOKEN",
        "SUPABASE_URL",
        "SUPABASE_SERVICE_ROLE_KEY",
        "SUPABASE_SERVICE_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        line_channel_secret="line-secret",
        line_channel_access_token="line-token",
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def confirmation_repository() -> InMemoryConfirmationRepository:
    return InMemoryConfirmationRepository()


@pytest.fixture
def well_wish_repository() -> InMemoryWellWishRepository:
    return InMemoryWellWishRepository()


@pytest.fixture
def card_repository() -> StaticCardRepository:
    return StaticCardRepository(cards=_default_cards())


@pytest.fixture
def line_client() -> FakeLineClient:
    return FakeLineClient()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def rsvp_service(
    confirmation_repository: InMemoryConfirmationRepository,
    well_wish_repository: InMemoryWellWishRepository,
) -> RsvpService:
    return RsvpService(
        confirmation_repository=confirmation_repository,
        well_wish_repository=well_wish_repository,
    )


@pytest.fixture
def conversation_service(
    session_store: InMemorySessionStore, rsvp_service: RsvpService
) -> ConversationService:
    return ConversationService(
        session_store=session_store,
        rsvp_service=rsvp_service,
        min_name_length=2,
        max_guests=50,
    )


@pytest.fixture
def event_handler(
    line_client: FakeLineClient,
    session_store: InMemorySessionStore,
    conversation_service: ConversationService,
    card_repository: StaticCardRepository,
) -> LineEventHandler:
    return LineEventHandler(
        line_client=line_client,
        session_store=session_store,
        conversation_service=conversation_service,
        card_service=CardService(card_repository),
        command_router=CommandRouter(),
    )


@pytest.fixture
def container(
    settings: Settings,
    line_client: FakeLineClient,
    session_store: InMemorySessionStore,
    rsvp_service: RsvpService,
    conversation_service: ConversationService,
    event_handler: LineEventHandler,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        line_client=line_client,
        session_store=session_store,
        rsvp_service=rsvp_service,
        card_service=event_handler.card_service,
        conversation_service=conversation_service,
        event_handler=event_handler,
        close_resources=close_resources,
    )

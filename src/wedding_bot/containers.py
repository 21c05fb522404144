"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from wedding_bot.adapters.file_card_repository import FileCardRepository
from wedding_bot.adapters.line_client import HttpxLineClient, LineClient
from wedding_bot.adapters.supabase_blessing_repository import (
    SupabaseBlessingRepository,
)
from wedding_bot.adapters.supabase_client import create_supabase_client
from wedding_bot.adapters.supabase_rsvp_repository import SupabaseRsvpRepository
from wedding_bot.config import Settings
from wedding_bot.services.cards import CardService
from wedding_bot.services.commands import CommandRouter
from wedding_bot.services.conversation import ConversationService
from wedding_bot.services.events import LineEventHandler
from wedding_bot.services.rsvp import RsvpService
from wedding_bot.services.session_store import InMemorySessionStore, SessionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    line_client: LineClient
    session_store: SessionStore
    rsvp_service: RsvpService
    card_service: CardService
    conversation_service: ConversationService
    event_handler: LineEventHandler
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_supabase_client(resolved_settings)
    rsvp_service = RsvpService(
        confirmation_repository=SupabaseRsvpRepository(supabase_client),
        well_wish_repository=SupabaseBlessingRepository(supabase_client),
    )
    session_store = InMemorySessionStore()
    line_client = HttpxLineClient.create(
        resolved_settings.line_channel_access_token or ""
    )
    card_service = CardService(FileCardRepository(resolved_settings.flex_dir))
    conversation_service = ConversationService(
        session_store=session_store,
        rsvp_service=rsvp_service,
        min_name_length=resolved_settings.rsvp_min_name_length,
        max_guests=resolved_settings.rsvp_max_guests,
    )
    event_handler = LineEventHandler(
        line_client=line_client,
        session_store=session_store,
        conversation_service=conversation_service,
        card_service=card_service,
        command_router=CommandRouter(),
    )

    async def close_resources() -> None:
        await line_client.close()

    return AppContainer(
        settings=resolved_settings,
        line_client=line_client,
        session_store=session_store,
        rsvp_service=rsvp_service,
        card_service=card_service,
        conversation_service=conversation_service,
        event_handler=event_handler,
        close_resources=close_resources,
    )

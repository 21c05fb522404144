"""Supabase client construction."""

from supabase import Client, create_client

from wedding_bot.config import Settings


def create_supabase_client(settings: Settings) -> Client | None:
    """Create a Supabase client, or None when credentials are missing."""
    if settings.missing_supabase_settings():
        return None
    return create_client(settings.supabase_url, settings.supabase_service_key)


def require_client(client: Client | None) -> Client:
    """Return ``client`` or fail when Supabase is not configured."""
    if client is None:
        raise RuntimeError("Supabase is not configured")
    return client

"""Application configuration."""

import os
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_DEFAULT_FLEX_DIR = Path(__file__).resolve().parent / "flex" / "bubbles"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Credentials are optional so the app can boot (and answer health probes)
    with an incomplete environment; use the ``missing_*`` helpers to report
    what is absent.
    """

    line_channel_secret: str | None = None
    line_channel_access_token: str | None = None
    supabase_url: str | None = None
    supabase_service_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "supabase_service_role_key", "supabase_service_key"
        ),
    )
    port: int = 3000
    rsvp_min_name_length: int = 2
    rsvp_max_guests: int = 50
    flex_dir: Path = _DEFAULT_FLEX_DIR
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )

    def missing_line_settings(self) -> list[str]:
        """Return LINE env variable names that are not set."""
        return _missing(
            {
                "LINE_CHANNEL_SECRET": self.line_channel_secret,
                "LINE_CHANNEL_ACCESS_TOKEN": self.line_channel_access_token,
            }
        )

    def missing_supabase_settings(self) -> list[str]:
        """Return Supabase env variable names that are not set."""
        return _missing(
            {
                "SUPABASE_URL": self.supabase_url,
                "SUPABASE_SERVICE_ROLE_KEY": self.supabase_service_key,
            }
        )


def _missing(values: dict[str, str | None]) -> list[str]:
    return [name for name, value in values.items() if not value]

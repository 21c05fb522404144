"""LINE Messaging API client adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_REPLY_URL = "https://api.line.me/v2/bot/message/reply"


class LineClient(Protocol):
    """Interface for LINE Messaging API interactions."""

    async def reply_message(
        self, reply_token: str, messages: list[dict[str, object]]
    ) -> None:
        """Reply to an inbound event using its reply token."""


@dataclass
class HttpxLineClient:
    """LINE client implemented with httpx."""

    channel_access_token: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, channel_access_token: str) -> "HttpxLineClient":
        """Create a LINE client with a managed httpx session."""
        return cls(
            channel_access_token=channel_access_token,
            http_client=httpx.AsyncClient(),
        )

    async def reply_message(
        self, reply_token: str, messages: list[dict[str, object]]
    ) -> None:
        """Send messages using LINE's reply API."""
        payload: dict[str, object] = {"replyToken": reply_token, "messages": messages}
        response = await self.http_client.post(
            _REPLY_URL,
            json=payload,
            headers={"Authorization": f"Bearer {self.channel_access_token}"},
            timeout=10,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

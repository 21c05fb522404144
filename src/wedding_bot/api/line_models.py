"""Pydantic models for LINE webhook payloads."""

from pydantic import BaseModel, Field


class LineSource(BaseModel):
    """Event source payload."""

    type: str | None = None
    user_id: str | None = Field(default=None, alias="userId")
    group_id: str | None = Field(default=None, alias="groupId")
    room_id: str | None = Field(default=None, alias="roomId")


class LineMessage(BaseModel):
    """Message payload of a message event."""

    id: str | None = None
    type: str
    text: str | None = None


class LineEvent(BaseModel):
    """Webhook event payload."""

    type: str
    message: LineMessage | None = None
    source: LineSource | None = None
    reply_token: str | None = Field(default=None, alias="replyToken")
    timestamp: int | None = None


class LineWebhook(BaseModel):
    """Webhook request body."""

    destination: str | None = None
    events: list[LineEvent] = Field(default_factory=list)

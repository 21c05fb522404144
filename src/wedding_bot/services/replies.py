"""Reply directives and their LINE message payloads."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextReply:
    """Plain text reply."""

    text: str

    def to_message(self) -> dict[str, object]:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class CardReply:
    """Pre-rendered Flex card reply."""

    alt_text: str
    contents: dict[str, object]

    def to_message(self) -> dict[str, object]:
        return {"type": "flex", "altText": self.alt_text, "contents": self.contents}


Reply = TextReply | CardReply

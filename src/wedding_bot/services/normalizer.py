"""Normalization of inbound LINE events."""

import re
from dataclasses import dataclass
from enum import Enum

_ATTACHMENT_TYPES = frozenset({"image", "file"})
_DIGITS = re.compile(r"\d+")


class InputKind(str, Enum):
    """Classification of an inbound message payload."""

    TEXT = "text"
    ATTACHMENT = "attachment"
    OTHER = "other"


@dataclass(frozen=True)
class NormalizedInput:
    """Inbound message reduced to what the conversation logic needs."""

    kind: InputKind
    text: str = ""

    @property
    def is_text(self) -> bool:
        return self.kind is InputKind.TEXT


def normalize_text(text: str | None) -> str:
    """Trim user text, treating a missing value as empty."""
    return (text or "").strip()


def normalize_message(message_type: str | None, text: str | None) -> NormalizedInput:
    """Classify a message by type and trim its text."""
    if message_type == "text":
        return NormalizedInput(kind=InputKind.TEXT, text=normalize_text(text))
    if message_type in _ATTACHMENT_TYPES:
        return NormalizedInput(kind=InputKind.ATTACHMENT)
    return NormalizedInput(kind=InputKind.OTHER)


def extract_number(text: str) -> int | None:
    """Return the first run of digits in ``text`` as an int, if any."""
    match = _DIGITS.search(text or "")
    if match is None:
        return None
    try:
        return int(match.group())
    except ValueError:
        return None

"""Domain models for conversation sessions."""

from dataclasses import dataclass, field, replace
from enum import Enum


class ConversationStep(str, Enum):
    """Steps a user can be in while a flow is pending."""

    ASK_NAME = "ASK_NAME"
    ASK_COUNT = "ASK_COUNT"
    ASK_BLESSING = "ASK_BLESSING"
    ASK_GIFT_SLIP = "ASK_GIFT_SLIP"


@dataclass(frozen=True)
class ConversationSession:
    """Ephemeral flow progress for one user.

    A user with no session is idle.
    """

    step: ConversationStep
    temp: dict[str, object] = field(default_factory=dict)

    @property
    def full_name(self) -> str | None:
        value = self.temp.get("full_name")
        return value if isinstance(value, str) else None

    def with_step(
        self, step: ConversationStep, **temp: object
    ) -> "ConversationSession":
        """Return a copy moved to ``step`` with ``temp`` merged in."""
        return replace(self, step=step, temp={**self.temp, **temp})

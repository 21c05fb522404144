"""Static card lookup."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from wedding_bot.domain.errors import ContentUnavailableError

logger = logging.getLogger(__name__)

# Ordered sources per card key; the first one that loads wins.
CARD_SOURCES: dict[str, tuple[str, ...]] = {
    "wedding": ("wedding_details.json", "event_details.json"),
    "travel": ("travel.json",),
    "blessing": ("blessing.json",),
    "confirm": ("confirm.json",),
    "gift": ("gift.json",),
}


class CardRepository(Protocol):
    """Source of pre-authored card payloads."""

    def load(self, name: str) -> dict[str, object]:
        """Return the parsed card stored under ``name``."""


@dataclass
class CardService:
    """Resolve logical card keys to card payloads."""

    repository: CardRepository
    sources: Mapping[str, Sequence[str]] = field(default_factory=lambda: CARD_SOURCES)

    def get_card(self, key: str) -> dict[str, object]:
        """Return the first loadable card for ``key``.

        Raises:
            ContentUnavailableError: if the key is unknown or every source
                fails to load.
        """
        for name in self.sources.get(key, ()):
            try:
                return self.repository.load(name)
            except (OSError, ValueError) as exc:
                logger.warning(
                    "Card source unavailable: %s (%s)",
                    name,
                    exc,
                    extra={"card_key": key},
                )
        raise ContentUnavailableError(key)

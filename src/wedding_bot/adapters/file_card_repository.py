"""File-backed Flex bubble repository."""

import json
from dataclasses import dataclass
from pathlib import Path

from wedding_bot.services.cards import CardRepository


@dataclass
class FileCardRepository(CardRepository):
    """Load Flex bubble JSON documents from a directory."""

    base_dir: Path

    def load(self, name: str) -> dict[str, object]:
        """Read and parse ``name`` relative to the base directory."""
        raw = (self.base_dir / name).read_text(encoding="utf-8")
        return json.loads(raw)

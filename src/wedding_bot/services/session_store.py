"""Per-user conversation session storage."""

import asyncio
import weakref
from dataclasses import dataclass, field
from typing import Protocol

from wedding_bot.domain.sessions import ConversationSession


class SessionStore(Protocol):
    """Storage interface for pending conversation sessions."""

    def get(self, user_id: str) -> ConversationSession | None:
        """Return the user's session, or None when the user is idle."""

    def set(self, user_id: str, session: ConversationSession) -> None:
        """Create or replace the user's session."""

    def delete(self, user_id: str) -> None:
        """Remove the user's session."""

    def lock(self, user_id: str) -> asyncio.Lock:
        """Return the lock serializing turns for a user."""


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-local session store.

    Sessions have no expiry. Callers hold ``lock(user_id)`` around a whole
    turn so two messages from the same user never interleave their
    read-modify-write. Locks are weakly held and vanish once no turn uses
    them.
    """

    sessions: dict[str, ConversationSession] = field(default_factory=dict)
    _locks: weakref.WeakValueDictionary[str, asyncio.Lock] = field(
        default_factory=weakref.WeakValueDictionary, repr=False
    )

    def get(self, user_id: str) -> ConversationSession | None:
        return self.sessions.get(user_id)

    def set(self, user_id: str, session: ConversationSession) -> None:
        self.sessions[user_id] = session

    def delete(self, user_id: str) -> None:
        self.sessions.pop(user_id, None)

    def lock(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock

"""Command routing for idle users."""

from dataclasses import dataclass, field

from wedding_bot.line_commands import BotCommand


@dataclass
class CommandRouter:
    """Map normalized text to a bot command.

    Rules are tried in declaration order; the first match wins.
    """

    commands: tuple[BotCommand, ...] = field(default_factory=lambda: tuple(BotCommand))

    def route(self, text: str) -> BotCommand | None:
        """Return the command triggered by ``text``, or None when unrecognized."""
        cleaned = text.strip()
        if not cleaned:
            return None
        for command in self.commands:
            if command.value.matches(cleaned):
                return command
        return None

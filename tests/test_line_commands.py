"""Tests for the command vocabulary."""

from wedding_bot.line_commands import CARD_COMMANDS, FLOW_COMMANDS, BotCommand


def test_card_and_flow_commands_do_not_overlap() -> None:
    assert not set(CARD_COMMANDS) & FLOW_COMMANDS
    assert BotCommand.HELP not in CARD_COMMANDS
    assert BotCommand.HELP not in FLOW_COMMANDS


def test_card_commands_cover_every_card_key() -> None:
    keys = {key for key, _ in CARD_COMMANDS.values()}

    assert keys == {"wedding", "travel", "blessing", "confirm", "gift"}


def test_aliases_match_case_insensitively() -> None:
    assert BotCommand.TRAVEL.value.matches("TRAVEL")
    assert BotCommand.CONFIRM_CARD.value.matches("Rsvp")
    assert not BotCommand.CONFIRM_CARD.value.matches("rsvp please")

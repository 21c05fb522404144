"""LINE bot command vocabulary."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class CommandRule:
    """Declarative text trigger for a command.

    ``phrases`` match the trimmed text exactly. ``aliases`` are ASCII words
    matched case-insensitively. ``predicate`` is an optional loose matcher run
    on the lower-cased text.
    """

    phrases: frozenset[str] = frozenset()
    aliases: frozenset[str] = frozenset()
    predicate: Callable[[str], bool] | None = field(default=None, compare=False)

    def matches(self, text: str) -> bool:
        """Return True when ``text`` triggers this rule."""
        if text in self.phrases:
            return True
        lowered = text.lower()
        if lowered in self.aliases:
            return True
        return self.predicate is not None and self.predicate(lowered)


def _mentions_slip_attachment(lowered: str) -> bool:
    return "แนบ" in lowered and ("slip" in lowered or "payslip" in lowered)


def _rule(
    *phrases: str,
    aliases: tuple[str, ...] = (),
    predicate: Callable[[str], bool] | None = None,
) -> CommandRule:
    return CommandRule(
        phrases=frozenset(phrases),
        aliases=frozenset(alias.lower() for alias in aliases),
        predicate=predicate,
    )


class BotCommand(Enum):
    """Enum of bot commands in matching order (single source of truth)."""

    WEDDING_DETAILS = _rule("รายละเอียดงาน", "รายละเอียดงานแต่งงาน")
    TRAVEL = _rule("การเดินทาง", aliases=("travel",))
    BLESSING_CARD = _rule("คำอวยพร")
    BEGIN_BLESSING = _rule("อวยพร")
    CONFIRM_CARD = _rule("ยืนยันมาร่วมงาน", aliases=("rsvp",))
    BEGIN_CONFIRMATION = _rule("ยืนยัน เจอกันแน่นอน", "ยืนยันเจอกันแน่นอน")
    EDIT_CONFIRMATION = _rule("แก้ไขการยืนยัน")
    GIFT_CARD = _rule("ของขวัญ", aliases=("gift",))
    BEGIN_GIFT_SLIP = _rule(
        "แนบสลิป / Pay Slip",
        "แนบ Payslip",
        "แนบสลิป",
        aliases=("แนบ payslip", "pay slip", "payslip"),
        predicate=_mentions_slip_attachment,
    )
    HELP = _rule("help", "ช่วยเหลือ", "เมนู")


# Commands answered with a pre-rendered card: (card key, alt text).
CARD_COMMANDS: dict[BotCommand, tuple[str, str]] = {
    BotCommand.WEDDING_DETAILS: ("wedding", "รายละเอียดงานแต่งงาน"),
    BotCommand.TRAVEL: ("travel", "การเดินทาง"),
    BotCommand.BLESSING_CARD: ("blessing", "ฝากคำอวยพร"),
    BotCommand.CONFIRM_CARD: ("confirm", "ยืนยันมาร่วมงาน"),
    BotCommand.GIFT_CARD: ("gift", "ของขวัญ"),
}

# Commands that open a conversation flow.
FLOW_COMMANDS: frozenset[BotCommand] = frozenset(
    {
        BotCommand.BEGIN_CONFIRMATION,
        BotCommand.EDIT_CONFIRMATION,
        BotCommand.BEGIN_BLESSING,
        BotCommand.BEGIN_GIFT_SLIP,
    }
)

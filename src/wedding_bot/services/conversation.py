"""Conversation state machine for RSVP, blessing and gift-slip flows."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from wedding_bot.domain.errors import PersistenceError
from wedding_bot.domain.rsvp import ConfirmationRecord
from wedding_bot.domain.sessions import ConversationSession, ConversationStep
from wedding_bot.line_commands import BotCommand
from wedding_bot.services.normalizer import InputKind, NormalizedInput, extract_number
from wedding_bot.services.replies import TextReply
from wedding_bot.services.rsvp import RsvpService
from wedding_bot.services.session_store import SessionStore

logger = logging.getLogger(__name__)

MIN_BLESSING_LENGTH = 2

PERSISTENCE_FAILURE_TEXT = (
    "ขออภัยค่ะ ตอนนี้ระบบบันทึกข้อมูลขัดข้อง 🙏\n"
    "รบกวนส่งข้อความเดิมอีกครั้งในอีกสักครู่นะคะ"
)
MENU_HINT = (
    "พิมพ์ดูข้อมูลได้เลย:\n- รายละเอียดงาน\n- การเดินทาง\n- คำอวยพร\n- ของขวัญ"
)


@dataclass
class ConversationService:
    """Drive per-user flows one message at a time.

    The caller must hold the session store's lock for ``user_id`` while
    calling :meth:`start` or :meth:`advance`.
    """

    session_store: SessionStore
    rsvp_service: RsvpService
    min_name_length: int = 2
    max_guests: int = 50

    def has_session(self, user_id: str) -> bool:
        """Return True when the user is mid-flow."""
        return self.session_store.get(user_id) is not None

    def start(self, user_id: str, command: BotCommand) -> TextReply:
        """Open the flow for a flow-start command."""
        if command is BotCommand.BEGIN_CONFIRMATION:
            try:
                existing = self.rsvp_service.get_confirmation(user_id)
            except PersistenceError:
                return TextReply(PERSISTENCE_FAILURE_TEXT)
            if existing is not None:
                return TextReply(_already_confirmed_text(existing))
            self._enter(user_id, ConversationSession(ConversationStep.ASK_NAME))
            return TextReply("ขอชื่อ-นามสกุลเพื่อยืนยันการมาร่วมงาน")
        if command is BotCommand.EDIT_CONFIRMATION:
            self._enter(user_id, ConversationSession(ConversationStep.ASK_NAME))
            return TextReply("ได้เลยค่ะ ✨ ขอชื่อ-นามสกุลใหม่อีกครั้งนะคะ")
        if command is BotCommand.BEGIN_BLESSING:
            self._enter(user_id, ConversationSession(ConversationStep.ASK_BLESSING))
            return TextReply(
                "พิมพ์คำอวยพรของคุณได้เลยนะคะ 🤍 (ส่งมาเป็น 1 ข้อความได้เลย)"
            )
        if command is BotCommand.BEGIN_GIFT_SLIP:
            self._enter(user_id, ConversationSession(ConversationStep.ASK_GIFT_SLIP))
            return TextReply(
                "ได้เลยค่ะ 🤍 แนบสลิปเป็นรูปภาพหรือไฟล์เข้ามาในแชทนี้ได้เลยนะคะ"
            )
        raise ValueError(f"{command.name} does not start a flow")

    def advance(self, user_id: str, inbound: NormalizedInput) -> TextReply | None:
        """Treat ``inbound`` as the answer to the user's current step.

        Returns None when the input is ignored for the current step.
        """
        session = self.session_store.get(user_id)
        if session is None:
            return None
        handler = _TRANSITIONS.get((session.step, inbound.kind))
        if handler is None:
            return None
        return handler(self, user_id, session, inbound)

    def _answer_name(
        self, user_id: str, session: ConversationSession, inbound: NormalizedInput
    ) -> TextReply:
        full_name = inbound.text
        if len(full_name) < self.min_name_length:
            return TextReply("ขอชื่อ-นามสกุลอีกครั้งได้ไหมคะ (เช่น Natara Thawattara)")
        self._enter(
            user_id, session.with_step(ConversationStep.ASK_COUNT, full_name=full_name)
        )
        return TextReply("มาทั้งหมดกี่คนคะ? (รวมตัวเอง) เช่น 1, 2, 3")

    def _answer_count(
        self, user_id: str, session: ConversationSession, inbound: NormalizedInput
    ) -> TextReply:
        if session.full_name is None:
            self._enter(user_id, ConversationSession(ConversationStep.ASK_NAME))
            return TextReply("ขอชื่อ-นามสกุลเพื่อยืนยันการมาร่วมงาน")
        guests_count = self.parse_guests_count(inbound.text)
        if guests_count is None:
            return TextReply(
                f"รบกวนพิมพ์เป็นตัวเลข 1–{self.max_guests} นะคะ (รวมตัวเอง) เช่น 2"
            )
        try:
            saved = self.rsvp_service.upsert_confirmation(
                user_id, session.full_name, guests_count
            )
        except PersistenceError:
            return TextReply(PERSISTENCE_FAILURE_TEXT)
        self._finish(user_id, session)
        return TextReply(
            "ขอบคุณที่ยืนยันนะคะ 🤍 เราจะเตรียมที่นั่ง/การต้อนรับตามจำนวนนี้ค่ะ ✅\n"
            f"ชื่อ: {saved.full_name}\n"
            f"จำนวน: {saved.guests_count} คน\n\n"
            f"{MENU_HINT}"
        )

    def _answer_blessing(
        self, user_id: str, session: ConversationSession, inbound: NormalizedInput
    ) -> TextReply:
        message = inbound.text
        if len(message) < MIN_BLESSING_LENGTH:
            return TextReply("พิมพ์คำอวยพรอีกครั้งได้ไหมคะ 🤍")
        try:
            self.rsvp_service.append_well_wish(user_id, message)
        except PersistenceError:
            return TextReply(PERSISTENCE_FAILURE_TEXT)
        self._finish(user_id, session)
        return TextReply(
            "รับคำอวยพรเรียบร้อยแล้วค่ะ 🥺🤍\nขอบคุณมากจริง ๆ นะคะ\n\nพระเจ้าอวยพรนะคะ"
        )

    def _receive_slip(
        self, user_id: str, session: ConversationSession, inbound: NormalizedInput
    ) -> TextReply:
        self._finish(user_id, session)
        return TextReply(
            "ขอบคุณสำหรับของขวัญมาก ๆ นะคะ 🤍\n"
            "ทางเรารับสลิปเรียบร้อยแล้วค่ะ\n\n"
            "พระเจ้าอวยพรนะคะ"
        )

    def _remind_slip(
        self, user_id: str, session: ConversationSession, inbound: NormalizedInput
    ) -> TextReply:
        return TextReply("แนบสลิปเป็น “รูปภาพ” หรือ “ไฟล์” ได้เลยนะคะ 🤍")

    def parse_guests_count(self, text: str) -> int | None:
        """Return the guest count in ``text`` when it is within range."""
        count = extract_number(text)
        if count is None or not 1 <= count <= self.max_guests:
            return None
        return count

    def _enter(self, user_id: str, session: ConversationSession) -> None:
        previous = self.session_store.get(user_id)
        self.session_store.set(user_id, session)
        logger.info(
            "Session step %s -> %s",
            previous.step.value if previous else "IDLE",
            session.step.value,
            extra={"user_id": user_id},
        )

    def _finish(self, user_id: str, session: ConversationSession) -> None:
        self.session_store.delete(user_id)
        logger.info(
            "Session step %s -> IDLE", session.step.value, extra={"user_id": user_id}
        )


_Handler = Callable[
    [ConversationService, str, ConversationSession, NormalizedInput], TextReply
]

# (step, input kind) -> handler; missing pairs are ignored without a reply.
_TRANSITIONS: dict[tuple[ConversationStep, InputKind], _Handler] = {
    (ConversationStep.ASK_NAME, InputKind.TEXT): ConversationService._answer_name,
    (ConversationStep.ASK_COUNT, InputKind.TEXT): ConversationService._answer_count,
    (
        ConversationStep.ASK_BLESSING,
        InputKind.TEXT,
    ): ConversationService._answer_blessing,
    (
        ConversationStep.ASK_GIFT_SLIP,
        InputKind.ATTACHMENT,
    ): ConversationService._receive_slip,
    (ConversationStep.ASK_GIFT_SLIP, InputKind.TEXT): ConversationService._remind_slip,
}


def _already_confirmed_text(record: ConfirmationRecord) -> str:
    return (
        "คุณยืนยันมาแล้วค่ะ ✅\n"
        f"ชื่อ: {record.full_name}\n"
        f"จำนวน: {record.guests_count} คน\n\n"
        "หากมีเหตุจำเป็นที่ต้องเปลี่ยนแปลง รบกวนพิมพ์ ‘แก้ไขการยืนยัน’ "
        "หรือทักเราในแชทนี้ได้เลยนะคะ"
    )

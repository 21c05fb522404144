"""Inbound LINE message handling."""

import logging
from dataclasses import dataclass

from wedding_bot.adapters.line_client import LineClient
from wedding_bot.domain.errors import ContentUnavailableError
from wedding_bot.line_commands import CARD_COMMANDS, FLOW_COMMANDS, BotCommand
from wedding_bot.services.cards import CardService
from wedding_bot.services.commands import CommandRouter
from wedding_bot.services.conversation import ConversationService
from wedding_bot.services.normalizer import NormalizedInput, normalize_message
from wedding_bot.services.replies import CardReply, Reply, TextReply
from wedding_bot.services.session_store import SessionStore

logger = logging.getLogger(__name__)

UNIDENTIFIED_USER_TEXT = (
    "ขออภัย ระบบอ่าน userId ไม่ได้ ลองพิมพ์ใหม่ในแชทส่วนตัวกับบอทอีกครั้งนะคะ"
)
HELP_TEXT = (
    "พิมพ์คำสั่งได้เลยค่ะ:\n"
    "- รายละเอียดงาน\n"
    "- การเดินทาง\n"
    "- ยืนยันมาร่วมงาน\n"
    "- คำอวยพร\n"
    "- ของขวัญ"
)
FALLBACK_TEXT = "พิมพ์ “เมนู” เพื่อดูคำสั่งทั้งหมดได้นะคะ 🤍"

# Apology shown when a card cannot be loaded, keyed by card key.
CARD_FAILURE_TEXT: dict[str, str] = {
    "wedding": "ขออภัยค่ะ ตอนนี้เปิดรายละเอียดงานไม่ได้ (ไฟล์ Flex อาจยังไม่ถูกต้อง) 🙏",
    "travel": "ขออภัยค่ะ ตอนนี้เปิดการเดินทางไม่ได้ 🙏",
    "blessing": "ขออภัยค่ะ ตอนนี้เปิดการ์ดคำอวยพรไม่ได้ 🙏",
    "confirm": "ขออภัยค่ะ ตอนนี้เปิดการ์ดยืนยันมาร่วมงานไม่ได้ 🙏",
    "gift": "ขออภัยค่ะ ตอนนี้เปิดการ์ดของขวัญไม่ได้ 🙏",
}


@dataclass
class LineEventHandler:
    """Decide and deliver the reply for each inbound message."""

    line_client: LineClient
    session_store: SessionStore
    conversation_service: ConversationService
    card_service: CardService
    command_router: CommandRouter

    async def handle_message(
        self,
        user_id: str | None,
        reply_token: str | None,
        message_type: str | None,
        text: str | None = None,
    ) -> Reply | None:
        """Handle one message event and send its reply, if any.

        Turns for the same user are serialized on the session store's lock.
        Transport errors propagate to the caller.
        """
        if not user_id:
            unidentified = TextReply(UNIDENTIFIED_USER_TEXT)
            await self._send(reply_token, unidentified)
            return unidentified

        inbound = normalize_message(message_type, text)
        async with self.session_store.lock(user_id):
            reply = self.respond(user_id, inbound)
            if reply is not None:
                await self._send(reply_token, reply)
        return reply

    def respond(self, user_id: str, inbound: NormalizedInput) -> Reply | None:
        """Return the reply for ``inbound``; an active session takes priority."""
        if self.conversation_service.has_session(user_id):
            return self.conversation_service.advance(user_id, inbound)
        if not inbound.is_text:
            return None
        command = self.command_router.route(inbound.text)
        if command is None:
            return TextReply(FALLBACK_TEXT)
        if command is BotCommand.HELP:
            return TextReply(HELP_TEXT)
        if command in CARD_COMMANDS:
            return self._card_reply(command)
        if command in FLOW_COMMANDS:
            return self.conversation_service.start(user_id, command)
        return TextReply(FALLBACK_TEXT)

    def _card_reply(self, command: BotCommand) -> Reply:
        key, alt_text = CARD_COMMANDS[command]
        try:
            contents = self.card_service.get_card(key)
        except ContentUnavailableError:
            logger.exception("Flex card load error", extra={"card_key": key})
            return TextReply(CARD_FAILURE_TEXT[key])
        return CardReply(alt_text=alt_text, contents=contents)

    async def _send(self, reply_token: str | None, reply: Reply) -> None:
        if not reply_token:
            logger.warning("Dropping reply without a reply token")
            return
        try:
            await self.line_client.reply_message(reply_token, [reply.to_message()])
        except Exception:
            logger.exception("Failed to deliver LINE reply")
            raise

"""
transport/telegram_transport.py
--------------------------------
Telegram transport built on python-telegram-bot.

The Application's bot is used read-only after startup. It is injected
wherever it is needed instead of living as a module-level global.
"""

from typing import Awaitable, Callable, Iterable, Optional

from telegram import Bot, InlineKeyboardButton, InlineKeyboardMarkup, Message, Update
from telegram.error import (
    BadRequest,
    ChatMigrated,
    Conflict,
    Forbidden,
    InvalidToken,
    RetryAfter,
    TelegramError,
)
from telegram.ext import Application, ContextTypes, TypeHandler

from models.events import (
    BotIdentity,
    CallbackEvent,
    Ignored,
    InboundEvent,
    MessageEvent,
    ReplyReference,
)
from models.faults import GenericFault, TransportApiFault
from models.keyboard import KeyboardLayout
from utils.logger import get_logger

logger = get_logger(__name__)

EventCallback = Callable[[InboundEvent], Awaitable[None]]
FaultCallback = Callable[[BaseException], object]

# BadRequest subclasses NetworkError, so it must match before the generic fallback.
_ERROR_CODES: list[tuple[type[TelegramError], int]] = [
    (RetryAfter, 429),
    (Forbidden, 403),
    (InvalidToken, 401),
    (Conflict, 409),
    (ChatMigrated, 400),
    (BadRequest, 400),
]


def to_fault(exc: BaseException) -> Exception:
    """
    Map any exception onto the fault taxonomy.

    Platform rejections become TransportApiFault with their HTTP-style code.
    Network errors, timeouts and everything else become GenericFault.
    """
    if isinstance(exc, (TransportApiFault, GenericFault)):
        return exc
    for error_type, code in _ERROR_CODES:
        if isinstance(exc, error_type):
            return TransportApiFault(code, exc.message)
    return GenericFault(exc)


def _sender_id(message: Message) -> Optional[int]:
    return message.from_user.id if message.from_user else None


def to_inbound_event(update: Update) -> InboundEvent:
    """
    Convert a raw Telegram update into a domain event.

    Only plain messages and callback queries are recognised. Edited
    messages, channel posts and every other update kind are Ignored.
    """
    if update.message is not None:
        message = update.message
        replied_to = None
        if message.reply_to_message is not None:
            replied_to = ReplyReference(sender_id=_sender_id(message.reply_to_message))
        return MessageEvent(
            chat_id=message.chat_id,
            sender_id=_sender_id(message),
            text=message.text,
            replied_to=replied_to,
        )

    if update.callback_query is not None:
        query = update.callback_query
        # Inline-mode keyboards have no originating message; a user's id is
        # also the id of their private chat with the bot.
        if query.message is not None:
            chat_id = query.message.chat.id
        else:
            chat_id = query.from_user.id
        return CallbackEvent(callback_id=query.id, chat_id=chat_id, data=query.data or "")

    return Ignored(update_id=update.update_id)


def to_markup(layout: KeyboardLayout) -> InlineKeyboardMarkup:
    """Convert a keyboard layout to Telegram's inline markup."""
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(button.label, callback_data=button.data) for button in row]
            for row in layout.rows
        ]
    )


class TelegramTransport:
    """Receives updates from and sends actions to the Telegram Bot API."""

    def __init__(self, application: Application):
        self.application = application
        self._allowed_updates: list[str] = Update.ALL_TYPES

    @property
    def bot(self) -> Bot:
        return self.application.bot

    async def get_self(self) -> BotIdentity:
        """Fetch the bot's own account. Fails fast on an invalid token."""
        try:
            me = await self.bot.get_me()
        except TelegramError as e:
            raise to_fault(e) from e
        return BotIdentity(id=me.id, username=me.username)

    def receive_updates(
        self,
        on_event: EventCallback,
        on_fault: FaultCallback,
        allowed_updates: Iterable[str] = (),
    ) -> None:
        """
        Register the callbacks that receive every update and every fault.

        Args:
            on_event: Awaited with the converted event for each update.
            on_fault: Called with each fault raised while polling or handling.
            allowed_updates: Update kinds to subscribe to. Empty means all.
        """
        async def _on_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            await on_event(to_inbound_event(update))

        async def _on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
            on_fault(to_fault(context.error))

        self._allowed_updates = list(allowed_updates) or Update.ALL_TYPES
        self.application.add_handler(TypeHandler(Update, _on_update))
        self.application.add_error_handler(_on_error)

    def run(self, drop_pending_updates: bool = False) -> None:
        """Start long polling. Blocks until the process is asked to stop."""
        logger.info(f"Polling for updates: {', '.join(self._allowed_updates)}")
        self.application.run_polling(
            allowed_updates=self._allowed_updates,
            drop_pending_updates=drop_pending_updates,
        )

    async def send_text(
        self, chat_id: int, text: str, keyboard: Optional[KeyboardLayout] = None
    ) -> Message:
        """Send a text message, with an inline keyboard when one is given."""
        reply_markup = to_markup(keyboard) if keyboard is not None else None
        try:
            return await self.bot.send_message(
                chat_id=chat_id, text=text, reply_markup=reply_markup
            )
        except TelegramError as e:
            raise to_fault(e) from e

    async def acknowledge_callback(self, callback_id: str, text: str) -> None:
        """Answer a callback query so the client stops its loading indicator."""
        try:
            await self.bot.answer_callback_query(callback_query_id=callback_id, text=text)
        except TelegramError as e:
            raise to_fault(e) from e

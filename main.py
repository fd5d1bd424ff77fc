"""
main.py
-------
Entry point for the gateway bot.

Responsibilities:
    - Build the Telegram application from the configured token.
    - Wire the transport, the update dispatcher and the error classifier.
    - Confirm the credential and register the command menu on startup.

Shutdown: Application.stop() waits for every update still being handled
before post_stop runs. That wait has no time limit; a send stuck in the
network ends only when its own request timeout fires.
"""

from telegram import BotCommand
from telegram.ext import Application

from config import (
    ALLOWED_UPDATES,
    CONCURRENT_UPDATES,
    DROP_PENDING_UPDATES,
    LOG_LEVEL,
    TELEGRAM_BOT_TOKEN,
)
from handlers.update_dispatcher import UpdateDispatcher
from services.command_router import COMMAND_DESCRIPTIONS
from services.error_classifier import ErrorClassifier
from transport.telegram_transport import TelegramTransport
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


async def on_startup(application: Application) -> None:
    """Confirm the credential and register the bot commands menu."""
    transport: TelegramTransport = application.bot_data["transport"]
    me = await transport.get_self()
    logger.info(f"Bot started: @{me.username}")

    commands = [BotCommand(name, description) for name, description in COMMAND_DESCRIPTIONS]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def on_shutdown(application: Application) -> None:
    """Runs once every in-flight update has been handled."""
    logger.info("Bot stopping...")


def build_application(
    token: str, classifier: ErrorClassifier | None = None
) -> tuple[Application, TelegramTransport]:
    """Build the Telegram application and wire every collaborator into it."""
    concurrent = CONCURRENT_UPDATES if CONCURRENT_UPDATES > 1 else False
    app = (
        Application.builder()
        .token(token)
        .concurrent_updates(concurrent)
        .post_init(on_startup)
        .post_stop(on_shutdown)
        .build()
    )

    classifier = classifier or ErrorClassifier()
    transport = TelegramTransport(app)
    dispatcher = UpdateDispatcher(transport, classifier=classifier)
    transport.receive_updates(dispatcher.dispatch, classifier.classify, ALLOWED_UPDATES)

    app.bot_data["transport"] = transport
    return app, transport


def main() -> None:
    """Initialize and run the bot."""
    setup_logging(LOG_LEVEL)

    if not TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN is not configured. Add it to the .env file.")
        return

    app, transport = build_application(TELEGRAM_BOT_TOKEN)

    logger.info("Gateway bot is running! Press Ctrl+C to stop.")
    transport.run(drop_pending_updates=DROP_PENDING_UPDATES)
    logger.info("Gateway bot stopped.")


if __name__ == "__main__":
    main()

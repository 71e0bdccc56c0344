import logging

from telegram import Update
from telegram.error import BadRequest, Forbidden, TimedOut, NetworkError
from telegram.ext import (
    Application,
    ApplicationBuilder,
    CommandHandler,
    ContextTypes,
)

from config import TG_BOT_TOKEN, PROXY_URL, ID_LIMIT
import handlers.cards as hand_card
import handlers.help as hand_help
import handlers.records as hand_record
import handlers.start as hand_start
from store.forge import Forge


def build_application(forge: Forge) -> Application:
    builder = ApplicationBuilder().token(TG_BOT_TOKEN)
    if PROXY_URL:
        builder = builder.proxy(PROXY_URL).get_updates_proxy(PROXY_URL)
    application = builder.build()

    # one store per process; every handler reaches it through bot_data
    application.bot_data['forge'] = forge

    application.add_handler(CommandHandler('start', hand_start.start))
    application.add_handler(CommandHandler('help', hand_help.help_command))

    # Records
    application.add_handler(CommandHandler('addrecord', hand_record.add_record))
    application.add_handler(CommandHandler('records', hand_record.my_records))
    application.add_handler(CommandHandler('allrecords', hand_record.all_records))
    application.add_handler(CommandHandler('editrecord', hand_record.edit_record))
    application.add_handler(CommandHandler('delrecord', hand_record.delete_record))
    application.add_handler(CommandHandler('count', hand_record.count_command))

    # Flashcards
    application.add_handler(CommandHandler('addcard', hand_card.add_card))
    application.add_handler(CommandHandler('cards', hand_card.record_cards))
    application.add_handler(CommandHandler('editcard', hand_card.edit_card))
    application.add_handler(CommandHandler('delcard', hand_card.delete_card))

    application.add_error_handler(error_handler)
    return application


def main() -> None:
    logging.info("Running main")

    forge = Forge(id_limit=ID_LIMIT)
    forge.subscribe(lambda event: logging.info(f"{event.name}: {event}"))

    application = build_application(forge)
    application.run_polling()


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Global error handler: logs the error and tries to notify the user."""
    error = context.error
    logging.error(f"Update {update} caused error: {error}", exc_info=error)

    if isinstance(error, Forbidden):
        # User blocked the bot, nothing we can do
        logging.warning(f"Bot was blocked by user: {error}")
        return

    # BadRequest subclasses NetworkError, so it is checked first
    if isinstance(error, BadRequest):
        logging.warning(f"Bad request: {error}")
    elif isinstance(error, (TimedOut, NetworkError)):
        logging.warning(f"Network issue: {error}")
        return

    if isinstance(update, Update) and update.effective_chat:
        try:
            await context.bot.send_message(
                chat_id=update.effective_chat.id,
                text="\u26a0\ufe0f Something went wrong. Try /help."
            )
        except Exception as e:
            logging.warning(f"Could not notify chat {update.effective_chat.id}: {e}")


if __name__ == '__main__':
    logging.info("Starting app")
    main()

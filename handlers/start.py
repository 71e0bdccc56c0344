import html
import logging

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import get_forge
from utils.telegram_helpers import safe_send_text


def build_greeting(name: str, record_total: int) -> str:
    if record_total == 0:
        summary = "<i>No records yet \u2014 add your first one!</i>"
    elif record_total == 1:
        summary = "<i>You have 1 record</i>"
    else:
        summary = f"<i>You have {record_total} records</i>"

    return (
        f"Hey {html.escape(name)} \U0001f44b\n\n"
        "I keep your notes as records and the flashcards you write for them.\n\n"
        f"{summary}\n\n"
        "Send /help to see the commands."
    )


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    logging.info("Started /start")

    user_id = update.effective_user.id
    records = get_forge(context).get_all_records_from_address(user_id)
    await safe_send_text(update.message, build_greeting(update.effective_user.first_name, len(records)))

from telegram import Update
from telegram.ext import ContextTypes

from utils.telegram_helpers import safe_send_text


HELP_TEXT = (
    "<b>\u2753 How it works</b>\n\n"
    "<b>Records</b> hold what you learned, <b>cards</b> quiz you on it.\n\n"
    "<code>/addrecord title | description</code>\n"
    "<code>/records</code> \u00b7 your records\n"
    "<code>/allrecords</code> \u00b7 everyone's records\n"
    "<code>/editrecord 3 title | description</code>\n"
    "<code>/delrecord 3</code> \u00b7 also deletes your cards on it\n\n"
    "<code>/addcard 3 question | answer</code>\n"
    "<code>/cards 3</code> \u00b7 cards on record 3\n"
    "<code>/editcard 7 question | answer</code>\n"
    "<code>/delcard 7</code>\n\n"
    "<code>/count</code> \u00b7 totals\n\n"
    "Only the author of a record or card can edit or delete it."
)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await safe_send_text(update.message, HELP_TEXT)

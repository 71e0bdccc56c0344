import html
import logging

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import command_text, get_forge, store_command
from store.schema import Flashcard
from utils.constants import DESCRIPTION_PREVIEW_MAX, LIST_PREVIEW_MAX, QUESTION_MAX, USAGE
from utils.telegram_helpers import safe_send_lines, safe_send_text
from utils.utils import parse_text, split_id, truncate


def card_line(card: Flashcard) -> str:
    question = html.escape(truncate(card.question, LIST_PREVIEW_MAX))
    answer = html.escape(truncate(card.answer, LIST_PREVIEW_MAX))
    return f"#{card.flashcard_id} <b>{question}</b>\n    \u21b3 {answer or '<i>no answer</i>'}"


def _parse_card(text: str) -> tuple[str, str]:
    question, answer = parse_text(text)
    if not question:
        raise ValueError("question is required")
    if len(question) > QUESTION_MAX:
        raise ValueError(f"question longer than {QUESTION_MAX}")
    return question, answer


@store_command(USAGE['addcard'])
async def add_card(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    logging.info("Started /addcard")
    record_id, rest = split_id(command_text(update))
    question, answer = _parse_card(rest)

    card_id = get_forge(context).add_flashcard(update.effective_user.id, record_id, question, answer)
    await safe_send_text(update.message, f"\u2705 Card #{card_id} added to record #{record_id}")


@store_command(USAGE['editcard'])
async def edit_card(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    card_id, rest = split_id(command_text(update))
    question, answer = _parse_card(rest)

    get_forge(context).update_flashcard(update.effective_user.id, card_id, question, answer)
    await safe_send_text(update.message, f"\u270f\ufe0f Card #{card_id} updated")


@store_command(USAGE['delcard'])
async def delete_card(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    card_id, _ = split_id(command_text(update))

    get_forge(context).remove_flashcard(update.effective_user.id, card_id)
    await safe_send_text(update.message, f"\U0001f5d1\ufe0f Card #{card_id} deleted")


@store_command(USAGE['cards'])
async def record_cards(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    record_id, _ = split_id(command_text(update))
    forge = get_forge(context)

    record = forge.get_record(record_id)
    cards = forge.get_all_flashcards_from_record(record_id)

    header = f"\U0001f4da <b>{html.escape(record.title)}</b> \u00b7 {len(cards)} cards"
    if record.description:
        description = truncate(record.description, DESCRIPTION_PREVIEW_MAX)
        header += f"\n<i>{html.escape(description)}</i>"
    if not cards:
        await safe_send_text(update.message, f"{header}\n\n<i>No cards yet</i>")
        return

    await safe_send_lines(update.message, header + "\n", [card_line(c) for c in cards])

import html
import logging
from datetime import datetime, timezone

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import command_text, get_forge, store_command
from store.schema import Record
from utils.constants import LIST_PREVIEW_MAX, TITLE_MAX, USAGE
from utils.telegram_helpers import safe_send_lines, safe_send_text
from utils.utils import parse_text, split_id, truncate


def _format_time(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime('%b %d %H:%M')


def record_line(record: Record) -> str:
    if record.record_id == 0:
        # an owner index entry whose record is gone
        return "#\u2014 <i>(removed)</i>"
    title = truncate(record.title, LIST_PREVIEW_MAX) or '<untitled>'
    return f"#{record.record_id} <b>{html.escape(title)}</b> \u00b7 {_format_time(record.timestamp)}"


def _parse_record(text: str) -> tuple[str, str]:
    title, description = parse_text(text)
    if not title:
        raise ValueError("title is required")
    if len(title) > TITLE_MAX:
        raise ValueError(f"title longer than {TITLE_MAX}")
    return title, description


@store_command(USAGE['addrecord'])
async def add_record(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    logging.info("Started /addrecord")
    title, description = _parse_record(command_text(update))

    record_id = get_forge(context).add_record(update.effective_user.id, title, description)
    await safe_send_text(
        update.message,
        f"\u2705 Saved record #{record_id} <b>{html.escape(title)}</b>\n\n"
        f"Add cards with <code>/addcard {record_id} question | answer</code>",
    )


@store_command(USAGE['editrecord'])
async def edit_record(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    record_id, rest = split_id(command_text(update))
    title, description = _parse_record(rest)

    get_forge(context).update_record(update.effective_user.id, record_id, title, description)
    await safe_send_text(update.message, f"\u270f\ufe0f Record #{record_id} updated")


@store_command(USAGE['delrecord'])
async def delete_record(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    record_id, _ = split_id(command_text(update))
    cascaded = get_forge(context).remove_record(update.effective_user.id, record_id)

    text = f"\U0001f5d1\ufe0f Record #{record_id} deleted"
    if cascaded:
        text += f" with {cascaded} card{'s' if cascaded != 1 else ''}"
    await safe_send_text(update.message, text)


@store_command()
async def my_records(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    records = get_forge(context).get_all_records_from_address(update.effective_user.id)
    if not records:
        await safe_send_text(
            update.message,
            f"<i>No records yet.</i> Start with <code>{USAGE['addrecord']}</code>",
        )
        return

    await safe_send_lines(
        update.message,
        f"\U0001f4da <b>Your records</b> \u00b7 {len(records)}\n",
        [record_line(r) for r in records],
    )


@store_command()
async def all_records(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    records = get_forge(context).get_all_records()
    if not records:
        await safe_send_text(update.message, "<i>Nobody has saved a record yet.</i>")
        return

    await safe_send_lines(
        update.message,
        f"\U0001f30d <b>All records</b> \u00b7 {len(records)}\n",
        [record_line(r) for r in records],
    )


@store_command()
async def count_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    forge = get_forge(context)
    mine = forge.get_all_flashcards_from_address(update.effective_user.id)
    await safe_send_text(
        update.message,
        f"\U0001f4ca Stats\n\n"
        f"\U0001f4da Records: {forge.record_count()}\n"
        f"\U0001f0cf Flashcards: {forge.flashcard_count()}\n"
        f"\U0001f464 Your flashcards: {len(mine)}",
    )

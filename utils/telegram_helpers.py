"""
Safe wrappers for Telegram API calls.

Handlers reply through these instead of raw message.reply_text, so a blocked
user or a flaky network never crashes a handler after the store has already
been changed.

All callers pass HTML (the default here) and wrap every piece of user text
(titles, descriptions, questions, answers) in html.escape() first:

    await safe_send_text(update.message, f"Record <b>{html.escape(record.title)}</b>")
"""

import logging
from typing import Any

from telegram import InlineKeyboardMarkup, Message
from telegram.error import BadRequest, Forbidden, TimedOut, NetworkError

logger = logging.getLogger(__name__)

# Telegram rejects messages longer than this
MESSAGE_LIMIT = 4096


async def safe_send_text(
    target: Message | tuple[int, Any],
    text: str,
    reply_markup: InlineKeyboardMarkup | None = None,
    parse_mode: str = 'HTML',
) -> bool:
    """Send a text message. target can be Message or (chat_id, bot) tuple."""
    try:
        if hasattr(target, 'reply_text'):
            await target.reply_text(text, reply_markup=reply_markup, parse_mode=parse_mode)  # type: ignore[union-attr]
        else:
            chat_id, bot = target
            await bot.send_message(chat_id=chat_id, text=text, reply_markup=reply_markup, parse_mode=parse_mode)
        return True
    except Forbidden:
        logger.warning("Bot was blocked by user")
        return False
    # BadRequest subclasses NetworkError, so it is caught first
    except BadRequest as e:
        logger.warning(f"safe_send_text BadRequest: {e}")
        return False
    except (TimedOut, NetworkError) as e:
        logger.warning(f"safe_send_text network error: {e}")
        return False


async def safe_send_lines(
    target: Message | tuple[int, Any],
    header: str,
    lines: list[str],
) -> bool:
    """Send a header plus lines, splitting into several messages when the text is too long."""
    chunks: list[str] = []
    current = header
    for line in lines:
        if len(current) + 1 + len(line) > MESSAGE_LIMIT:
            chunks.append(current)
            current = line
        else:
            current = f"{current}\n{line}" if current else line
    chunks.append(current)

    ok = True
    for chunk in chunks:
        ok = await safe_send_text(target, chunk) and ok
    return ok

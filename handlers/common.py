import html
import logging
from functools import wraps

from telegram import Update
from telegram.ext import ContextTypes

from store.errors import CapacityExceeded, ForgeError, NotFound, Unauthorized
from store.forge import Forge
from utils.telegram_helpers import safe_send_text

logger = logging.getLogger(__name__)


def get_forge(context: ContextTypes.DEFAULT_TYPE) -> Forge:
    return context.bot_data['forge']


def command_text(update: Update) -> str:
    """Everything after the /command, with newlines kept (context.args would drop them)."""
    parts = (update.message.text or '').split(None, 1)
    return parts[1] if len(parts) > 1 else ''


def error_text(error: ForgeError) -> str:
    if isinstance(error, NotFound):
        return f"\U0001f50d {html.escape(str(error))}"
    if isinstance(error, Unauthorized):
        return f"\u26d4 {html.escape(str(error))}"
    if isinstance(error, CapacityExceeded):
        return "\u26a0\ufe0f The store is full, nothing was saved."
    return f"\u26a0\ufe0f {html.escape(str(error))}"


def store_command(usage: str | None = None):
    """
    Wrap a command handler: store errors become a short reply, and a ValueError
    from argument parsing shows the usage line instead.
    """
    def decorator(handler):
        @wraps(handler)
        async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            try:
                await handler(update, context)
            except ForgeError as e:
                logger.info(f"{handler.__name__} refused for {update.effective_user.id}: {e}")
                await safe_send_text(update.message, error_text(e))
            except ValueError as e:
                if usage is None:
                    raise
                logger.info(f"{handler.__name__} bad arguments: {e}")
                await safe_send_text(update.message, f"Usage: <code>{usage}</code>")
        return wrapper
    return decorator

import logging

from telegram import Update
from telegram.ext import ContextTypes

from src.bot.access import is_allowed_chat
from src.config import TIMEZONE
from src.core.handler import handle_message
from src.utils.date_utils import local_today

logger = logging.getLogger(__name__)


async def handle_initial_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Lida com todas as mensagens de texto que não são comandos."""
    if not update.message or not update.message.text:
        return  # Não faz nada se a mensagem for vazia

    chat_id = update.message.chat_id
    if not is_allowed_chat(update):
        logger.info("Mensagem ignorada do chat não autorizado %s", chat_id)
        return

    user_message = update.message.text
    logger.info("Mensagem recebida de %s: %s", chat_id, user_message)

    sheets = context.bot_data["sheets"]
    response = await handle_message(user_message, sheets, local_today(TIMEZONE))
    await update.message.reply_text(response, parse_mode="Markdown")

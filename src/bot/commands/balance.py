import logging

from telegram import Update
from telegram.ext import ContextTypes

from src.bot.access import is_allowed_chat
from src.config import TIMEZONE
from src.core import formatter
from src.core.errors import ExternalServiceError
from src.core.models import QueryScope
from src.core.reports import run_query
from src.utils.date_utils import local_today

logger = logging.getLogger(__name__)


async def send_report(update: Update, context: ContextTypes.DEFAULT_TYPE, scope: QueryScope) -> None:
    """Monta o resumo do período pedido e responde no chat."""
    if not is_allowed_chat(update):
        return

    sheets = context.bot_data["sheets"]
    try:
        summary = await run_query(sheets, scope, local_today(TIMEZONE))
    except ExternalServiceError:
        logger.exception("Erro ao gerar o resumo %s", scope.value)
        await update.message.reply_text(formatter.format_service_error())
        return

    await update.message.reply_text(formatter.format_period_report(summary), parse_mode="Markdown")


async def saldo_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/saldo: resumo de hoje."""
    await send_report(update, context, QueryScope.TODAY)


async def semana_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/semana: resumo dos últimos 7 dias."""
    await send_report(update, context, QueryScope.WEEK)


async def mes_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/mes: resumo do mês até hoje."""
    await send_report(update, context, QueryScope.MONTH)

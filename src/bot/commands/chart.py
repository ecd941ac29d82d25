import logging

from telegram import Update
from telegram.ext import ContextTypes

from src.bot.access import is_allowed_chat
from src.config import TIMEZONE
from src.core import charts, formatter
from src.core.errors import ExternalServiceError
from src.core.reports import month_report
from src.utils.date_utils import local_today

logger = logging.getLogger(__name__)


async def grafico_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Gera e envia o gráfico do mês corrente."""
    if not is_allowed_chat(update):
        return

    sheets = context.bot_data["sheets"]
    await update.message.reply_text("Gerando o gráfico do mês, por favor aguarde... ⏳")
    try:
        summary = await month_report(sheets, local_today(TIMEZONE))
    except ExternalServiceError:
        logger.exception("Erro ao ler a planilha para o gráfico")
        await update.message.reply_text(formatter.format_service_error())
        return

    chart_buffer = charts.generate_month_chart(summary)
    if chart_buffer:
        chart_buffer.name = "grafico_mes.png"
        await update.message.reply_photo(
            photo=chart_buffer, caption=f"📊 Aqui está o movimento do {summary.label}:"
        )
    else:
        await update.message.reply_text(
            "📉 Ainda não há lançamentos neste mês para gerar o gráfico. Registre alguns valores primeiro! 📝"
        )

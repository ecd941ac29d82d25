# src/bot/bot_setup.py
import logging

from telegram.ext import Application, MessageHandler, filters, CommandHandler
from src.bot.commands import (
    start_command, help_command, saldo_command, semana_command, mes_command, grafico_command
)
from src.bot.handlers import handle_initial_message

logger = logging.getLogger(__name__)


def setup_and_run_bot(config: dict) -> Application:
    """
    Configura a aplicação do bot do Telegram (comandos e mensagens de texto).
    Retorna o objeto Application configurado, pronto para polling ou webhook.
    """
    application = Application.builder().token(config["TELEGRAM_BOT_TOKEN"]).build()

    # Serviço da planilha compartilhado por handlers e comandos
    application.bot_data["sheets"] = config["SHEETS_SERVICE"]

    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("saldo", saldo_command))
    application.add_handler(CommandHandler("semana", semana_command))
    application.add_handler(CommandHandler("mes", mes_command))
    application.add_handler(CommandHandler("grafico", grafico_command))

    # Qualquer texto que não seja comando é um lançamento ou consulta
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_initial_message))

    logger.info("Bot Telegram configurado.")
    return application

from telegram import Update
from telegram.ext import ContextTypes

from src.core.formatter import help_message


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia uma mensagem quando o comando /start é emitido."""
    await update.message.reply_text(
        "Olá! Sou seu bot de controle financeiro. Envie seus lançamentos "
        "(ex: 'diario 87,10', 'entrada 352,91 01/01') e eu atualizo a planilha. 📒\n\n"
        + help_message(),
        parse_mode="Markdown",
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia uma mensagem quando o comando /help é emitido."""
    await update.message.reply_text(help_message(), parse_mode="Markdown")

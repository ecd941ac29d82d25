# app.py
# Execução local com polling: python app.py
# Para webhook use src/main.py (gunicorn src.main:wsgi_app)
import logging
import sys

from telegram import Update

from src import config
from src.bot.bot_setup import setup_and_run_bot
from src.core.errors import ExternalServiceError
from src.core.sheets import SheetsService, get_worksheet

logger = logging.getLogger(__name__)


def main() -> None:
    """Inicia o bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.LOG_LEVEL,
    )

    missing = config.missing_settings()
    if missing:
        logger.error("Variáveis de ambiente faltando: %s. Crie um arquivo .env com elas.", ", ".join(missing))
        sys.exit(1)

    if config.ALLOWED_CHATS:
        logger.info("Modo restrito: o bot só responde aos chats %s", ", ".join(config.ALLOWED_CHATS))
    else:
        logger.warning("Modo aberto: o bot responde a QUALQUER chat. Configure ALLOWED_CHATS para restringir.")

    try:
        sheets_service = SheetsService(get_worksheet())
    except ExternalServiceError:
        logger.exception("Não foi possível conectar ao Google Sheets")
        sys.exit(1)

    application = setup_and_run_bot({
        "TELEGRAM_BOT_TOKEN": config.TELEGRAM_BOT_TOKEN,
        "SHEETS_SERVICE": sheets_service,
    })

    logger.info("Bot Telegram iniciado! Aguardando mensagens...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == '__main__':
    main()

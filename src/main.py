# src/main.py
"""Entrada para webhook: a aplicação Flask recebe os updates do Telegram (ex: servida por Gunicorn)."""
import asyncio
import logging

from flask import Flask, request, jsonify
from telegram import Update

from src import config
from src.bot.bot_setup import setup_and_run_bot
from src.core.sheets import SheetsService, get_worksheet

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=config.LOG_LEVEL,
)
logger = logging.getLogger(__name__)


def create_app() -> Flask:
    missing = config.missing_settings()
    if missing:
        raise RuntimeError(f"Variáveis de ambiente faltando: {', '.join(missing)}")

    sheets_service = SheetsService(get_worksheet())
    ptb_application = setup_and_run_bot({
        "TELEGRAM_BOT_TOKEN": config.TELEGRAM_BOT_TOKEN,
        "SHEETS_SERVICE": sheets_service,
    })
    # Inicializa a aplicação PTB uma única vez no startup
    asyncio.run(ptb_application.initialize())
    logger.info("python-telegram-bot Application inicializada.")

    flask_app = Flask(__name__)

    @flask_app.route(config.WEBHOOK_PATH, methods=["POST"])
    async def telegram_webhook():
        if not request.is_json:
            logger.error("Webhook recebeu uma requisição que não é JSON.")
            return jsonify({"status": "error", "message": "Request must be JSON"}), 400

        try:
            update = Update.de_json(request.get_json(), ptb_application.bot)
            await ptb_application.process_update(update)
            return jsonify({"status": "ok"}), 200
        except Exception:
            logger.exception("Falha ao processar update do Telegram")
            return jsonify({"status": "error", "message": "Failed to process update"}), 500

    return flask_app


# Gunicorn importa o módulo e serve wsgi_app (ex: gunicorn src.main:wsgi_app)
wsgi_app = create_app()

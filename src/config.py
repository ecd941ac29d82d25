# src/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Configurações do Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")
WEBHOOK_PATH = os.getenv("WEBHOOK_PATH", "/webhook")

# Chats autorizados (vazio = modo aberto, responde a qualquer chat)
ALLOWED_CHATS = [chat.strip() for chat in os.getenv("ALLOWED_CHATS", "").split(",") if chat.strip()]

# Configurações do Google Sheets (conta de serviço)
GOOGLE_CLIENT_EMAIL = os.getenv("GOOGLE_CLIENT_EMAIL")
GOOGLE_PRIVATE_KEY = (os.getenv("GOOGLE_PRIVATE_KEY") or "").replace("\\n", "\n")
SHEET_ID = os.getenv("SHEET_ID")
SHEET_NAME = os.getenv("SHEET_NAME", "")  # Vazio = primeira aba da planilha

# Fuso usado para saber qual é o "hoje" do usuário
TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

REQUIRED_SETTINGS = ("TELEGRAM_BOT_TOKEN", "GOOGLE_CLIENT_EMAIL", "GOOGLE_PRIVATE_KEY", "SHEET_ID")


def missing_settings() -> list:
    """Lista as variáveis de ambiente obrigatórias que não foram definidas."""
    return [name for name in REQUIRED_SETTINGS if not globals().get(name)]

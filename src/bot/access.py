# src/bot/access.py
from typing import Sequence

from telegram import Update

from src.config import ALLOWED_CHATS


def is_allowed_chat(update: Update, allowed_chats: Sequence[str] = None) -> bool:
    """Com ALLOWED_CHATS vazio o bot responde a qualquer chat (modo aberto)."""
    allowed = ALLOWED_CHATS if allowed_chats is None else allowed_chats
    if not allowed:
        return True
    chat = update.effective_chat
    return chat is not None and str(chat.id) in allowed

# src/core/handler.py
import datetime
import logging
from typing import Optional

from src.core import formatter
from src.core.errors import ExternalServiceError, InvalidDateError
from src.core.models import QueryCommand
from src.core.parser import parse_command
from src.core.reports import run_query
from src.core.sheets import SheetIO
from src.core.updater import register_value

logger = logging.getLogger(__name__)


async def handle_message(text: str, sheet: SheetIO, today: Optional[datetime.date] = None) -> str:
    """
    Processa uma mensagem e devolve o texto de resposta.
    Sempre devolve uma string (ajuda, confirmação, relatório ou erro); nunca levanta exceção.
    """
    today = today or datetime.date.today()
    try:
        command = parse_command(text, today)
        if command is None:
            return formatter.help_message()

        if isinstance(command, QueryCommand):
            summary = await run_query(sheet, command.scope, today)
            return formatter.format_period_report(summary)

        coordinate = await register_value(sheet, command)
        return formatter.format_update_confirmation(command, coordinate)

    except InvalidDateError as e:
        logger.info("Data inválida na mensagem %r: %s", text, e)
        return formatter.format_invalid_date(e)
    except ExternalServiceError:
        logger.exception("Erro ao acessar a planilha para a mensagem %r", text)
        return formatter.format_service_error()
    except Exception:
        logger.exception("Erro inesperado ao processar a mensagem %r", text)
        return formatter.format_unexpected_error()

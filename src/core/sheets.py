# src/core/sheets.py
import asyncio
import logging
from typing import Dict, Iterable, Optional, Protocol

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.utils import ValueInputOption

from src.config import GOOGLE_CLIENT_EMAIL, GOOGLE_PRIVATE_KEY, SHEET_ID, SHEET_NAME
from src.core.errors import ExternalServiceError
from src.core.models import CellCoordinate

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

# Erros da API/rede que viram ExternalServiceError
SERVICE_ERRORS = (gspread.exceptions.GSpreadException, GoogleAuthError, requests.exceptions.RequestException)


class SheetIO(Protocol):
    """O que o núcleo precisa da planilha: ler e escrever uma célula."""

    async def read_cell(self, coordinate: CellCoordinate) -> Optional[str]:
        ...

    async def write_cell(self, coordinate: CellCoordinate, value: str) -> None:
        ...


def get_worksheet(
    client_email: Optional[str] = GOOGLE_CLIENT_EMAIL,
    private_key: Optional[str] = GOOGLE_PRIVATE_KEY,
    sheet_id: Optional[str] = SHEET_ID,
    sheet_name: Optional[str] = SHEET_NAME,
) -> gspread.Worksheet:
    """Autentica com a conta de serviço e abre a aba da planilha de finanças."""
    if not client_email or not private_key or not sheet_id:
        raise ExternalServiceError("Variáveis de ambiente do Google Sheets não configuradas corretamente")

    service_account_info = {
        "type": "service_account",
        "client_email": client_email,
        "private_key": private_key,
        "token_uri": TOKEN_URI,
    }
    try:
        creds = Credentials.from_service_account_info(service_account_info, scopes=SCOPES)
        spreadsheet = gspread.authorize(creds).open_by_key(sheet_id)
        return spreadsheet.worksheet(sheet_name) if sheet_name else spreadsheet.sheet1
    except (ValueError, *SERVICE_ERRORS) as e:
        raise ExternalServiceError(f"Não foi possível abrir a planilha: {e}") from e


def first_value(value_range) -> Optional[str]:
    """Primeiro valor de um intervalo lido, ou None se a célula está vazia."""
    if value_range and len(value_range) > 0 and len(value_range[0]) > 0:
        value = value_range[0][0]
        return value if value != "" else None
    return None


class SheetsService:
    """Leitura e escrita de células na planilha via gspread (bloqueante, roda em thread)."""

    def __init__(self, worksheet: gspread.Worksheet):
        self.worksheet = worksheet

    async def read_cell(self, coordinate: CellCoordinate) -> Optional[str]:
        try:
            value_range = await asyncio.to_thread(self.worksheet.get, str(coordinate))
        except SERVICE_ERRORS as e:
            raise ExternalServiceError(f"Erro ao ler célula {coordinate}") from e
        return first_value(value_range)

    async def write_cell(self, coordinate: CellCoordinate, value: str) -> None:
        try:
            await asyncio.to_thread(
                self.worksheet.update,
                values=[[value]],
                range_name=str(coordinate),
                value_input_option=ValueInputOption.user_entered,
            )
        except SERVICE_ERRORS as e:
            raise ExternalServiceError(f"Erro ao escrever célula {coordinate}") from e
        logger.info("Célula %s atualizada com %s", coordinate, value)

    async def batch_read(self, coordinates: Iterable[CellCoordinate]) -> Dict[CellCoordinate, Optional[str]]:
        """Lê várias células em uma única requisição."""
        coordinates = list(coordinates)
        try:
            value_ranges = await asyncio.to_thread(
                self.worksheet.batch_get, [str(coordinate) for coordinate in coordinates]
            )
        except SERVICE_ERRORS as e:
            raise ExternalServiceError("Erro ao ler células em lote") from e

        result = {coordinate: None for coordinate in coordinates}
        for coordinate, value_range in zip(coordinates, value_ranges):
            result[coordinate] = first_value(value_range)
        return result

# src/core/parser.py
import datetime
import re
from typing import Optional, Union

from src.core.models import FieldKind, QueryCommand, QueryScope, UpdateCommand
from src.utils.date_utils import extract_date
from src.utils.money_utils import normalize_amount
from src.utils.text_utils import normalize_text

# A ordem importa: o primeiro padrão que casar vence
QUERY_PATTERNS = (
    (re.compile(r"^(saldo|resumo|extrato)\s*(hoje|hj)?$"), QueryScope.TODAY),
    (re.compile(r"^(saldo|resumo|extrato)\s*(semana|semanal)$"), QueryScope.WEEK),
    (re.compile(r"^(saldo|resumo|extrato)\s*(mes|mensal)$"), QueryScope.MONTH),
)

KEYWORDS_PATTERN = re.compile(r"entrada|saida|diario|hoje|amanha|ontem")
DATE_TOKEN_PATTERN = re.compile(r"\b\d{1,2}/\d{1,2}(?:/\d{2}|/\d{4})?\b")
NUMBER_PATTERN = re.compile(r"\d+(?:[.,]\d+)*")


def detect_query(normalized: str) -> Optional[QueryScope]:
    for pattern, scope in QUERY_PATTERNS:
        if pattern.match(normalized):
            return scope
    return None


def detect_kind(normalized: str) -> FieldKind:
    """Entrada, saída ou (padrão) diário."""
    if "entrada" in normalized:
        return FieldKind.ENTRADA
    if "saida" in normalized:
        return FieldKind.SAIDA
    return FieldKind.DIARIO


def extract_amount(normalized: str):
    """Remove palavras-chave e datas e pega o primeiro número que sobrar."""
    clean_text = KEYWORDS_PATTERN.sub(" ", normalized)
    clean_text = DATE_TOKEN_PATTERN.sub(" ", clean_text)

    match = NUMBER_PATTERN.search(clean_text)
    if not match:
        return None
    return normalize_amount(match.group(0))


def parse_command(
    text: str, reference: Optional[datetime.date] = None
) -> Union[UpdateCommand, QueryCommand, None]:
    """
    Interpreta uma mensagem.

    Exemplos:
    - "diario 87,10" -> Diário, 87.10, hoje
    - "diario 400 amanha" -> Diário, 400, amanhã
    - "517" -> Diário, 517, hoje
    - "entrada 352,91 01/01" -> Entrada, 352.91, 01/01 do ano atual
    - "saida 94,90 hoje" -> Saída, 94.90, hoje
    - "saldo semana" -> consulta da semana

    Retorna None quando a mensagem não é um comando reconhecido.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return None

    reference = reference or datetime.date.today()
    normalized = normalize_text(trimmed)

    scope = detect_query(normalized)
    if scope is not None:
        return QueryCommand(scope=scope)

    kind = detect_kind(normalized)
    amount = extract_amount(normalized)
    if amount is None:
        return None

    return UpdateCommand(
        kind=kind,
        amount=amount,
        date=extract_date(trimmed, reference),
        raw_text=trimmed,
    )

# src/utils/date_utils.py
import datetime
import re
from zoneinfo import ZoneInfo

from src.core.models import CalendarDate
from src.utils.text_utils import normalize_text

# dd/mm, dd/mm/aa ou dd/mm/aaaa
DATE_PATTERN = re.compile(r"\b(\d{1,2})/(\d{1,2})(?:/(\d{2}|\d{4}))?\b")

# Anos com 2 dígitos: abaixo do corte viram 20aa, a partir dele 19aa
TWO_DIGIT_YEAR_CUTOFF = 70

RELATIVE_DAYS = {
    "hoje": 0,
    "amanha": 1,
    "ontem": -1,
}


def expand_year(raw_year: str, reference_year: int) -> int:
    if not raw_year:
        return reference_year
    year = int(raw_year)
    if len(raw_year) == 2:
        return 2000 + year if year < TWO_DIGIT_YEAR_CUTOFF else 1900 + year
    return year


def resolve_date(token: str, reference: datetime.date) -> CalendarDate:
    """
    Converte um token de data ("hoje", "amanhã", "ontem", "dd/mm", "dd/mm/aaaa") em uma data concreta.
    Nunca falha: token vazio ou data numérica inválida voltam para a data de referência.
    """
    normalized = normalize_text(token)

    if normalized in RELATIVE_DAYS:
        return CalendarDate.from_date(reference + datetime.timedelta(days=RELATIVE_DAYS[normalized]))

    match = DATE_PATTERN.fullmatch(normalized)
    if not match:
        return CalendarDate.from_date(reference)

    day, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return CalendarDate.from_date(reference)

    # O dia pode não existir no mês (31/04); isso é reportado ao calcular a célula
    return CalendarDate(day=day, month=month, year=expand_year(match.group(3), reference.year))


def extract_date(text: str, reference: datetime.date) -> CalendarDate:
    """Procura o primeiro token de data em uma mensagem inteira (hoje, amanhã, ontem e depois dd/mm)."""
    normalized = normalize_text(text)

    for token in RELATIVE_DAYS:
        if re.search(rf"\b{token}\b", normalized):
            return resolve_date(token, reference)

    match = DATE_PATTERN.search(normalized)
    if match:
        return resolve_date(match.group(0), reference)

    return CalendarDate.from_date(reference)


def local_today(timezone: str) -> datetime.date:
    """Data de hoje no fuso do usuário (o servidor pode estar em UTC)."""
    return datetime.datetime.now(ZoneInfo(timezone)).date()

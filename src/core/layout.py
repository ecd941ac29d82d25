# src/core/layout.py
"""
Geometria da planilha anual.

Cada mês ocupa um bloco de 6 colunas lado a lado (Dia, Entrada, Saída, Diário, Saldo e uma coluna livre):
- JANEIRO: linhas 6-36, colunas B-F
- FEVEREIRO: linhas 6-33 (6-34 em ano bissexto), colunas H-L
- MARÇO: linhas 6-36, colunas N-R
- ABRIL: linhas 6-35, colunas T-X
- ...
O dia 1 está sempre na linha 6 e os dias seguintes nas linhas seguintes.
"""
from src.core.errors import InvalidDateError
from src.core.models import CellCoordinate, FieldKind, MonthLayout

START_ROW = 6
BLOCK_WIDTH = 6
THIRTY_DAY_MONTHS = (4, 6, 9, 11)

# Posição de cada campo dentro do bloco do mês (coluna A = 0)
BASE_COLUMNS = {
    FieldKind.DIA: 1,       # B
    FieldKind.ENTRADA: 2,   # C
    FieldKind.SAIDA: 3,     # D
    FieldKind.DIARIO: 4,    # E
    FieldKind.SALDO: 5,     # F
}


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_layout(month: int, year: int) -> MonthLayout:
    if not 1 <= month <= 12:
        raise ValueError(f"Mês inválido: {month}")

    end_row = START_ROW + 30  # 31 dias
    if month == 2:
        end_row = START_ROW + (28 if is_leap_year(year) else 27)
    elif month in THIRTY_DAY_MONTHS:
        end_row = START_ROW + 29

    return MonthLayout(
        month=month,
        year=year,
        start_row=START_ROW,
        end_row=end_row,
        column_offset=(month - 1) * BLOCK_WIDTH,
    )


def days_in_month(month: int, year: int) -> int:
    return month_layout(month, year).days_in_month


def column_to_letter(column: int) -> str:
    """Numeração bijetiva base 26: 0 -> A, 25 -> Z, 26 -> AA."""
    if column < 0:
        raise ValueError(f"Coluna inválida: {column}")

    letter = ""
    while column >= 0:
        letter = chr(ord("A") + column % 26) + letter
        column = column // 26 - 1
    return letter


def letter_to_column(letter: str) -> int:
    """Inverso de column_to_letter: A -> 0, AA -> 26."""
    column = 0
    for char in letter.upper():
        if not "A" <= char <= "Z":
            raise ValueError(f"Coluna inválida: {letter}")
        column = column * 26 + (ord(char) - ord("A") + 1)
    return column - 1


def cell_address(kind: FieldKind, day: int, layout: MonthLayout) -> CellCoordinate:
    """Célula de um campo em um dia do mês. Levanta InvalidDateError se o dia não existe no mês."""
    max_day = layout.days_in_month
    if day < 1 or day > max_day:
        raise InvalidDateError(month=layout.month, year=layout.year, day=day, max_day=max_day)

    column = BASE_COLUMNS[kind] + layout.column_offset
    return CellCoordinate(column_letter=column_to_letter(column), row=layout.start_row + (day - 1))

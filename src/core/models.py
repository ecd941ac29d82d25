# src/core/models.py
import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple, Union


class FieldKind(Enum):
    """Colunas de um bloco mensal da planilha."""
    DIA = "dia"
    ENTRADA = "entrada"
    SAIDA = "saida"
    DIARIO = "diario"
    SALDO = "saldo"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]


FIELD_LABELS = {
    FieldKind.DIA: "Dia",
    FieldKind.ENTRADA: "Entrada",
    FieldKind.SAIDA: "Saída",
    FieldKind.DIARIO: "Diário",
    FieldKind.SALDO: "Saldo",
}


class QueryScope(Enum):
    TODAY = "hoje"
    WEEK = "semana"
    MONTH = "mes"


@dataclass(frozen=True)
class CalendarDate:
    """
    Data concreta (dia, mês, ano).
    Pode guardar um dia inexistente no mês (ex: 31/04); quem valida é o cálculo de endereço.
    """
    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, value: datetime.date) -> "CalendarDate":
        return cls(day=value.day, month=value.month, year=value.year)

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year}"


@dataclass(frozen=True)
class UpdateCommand:
    kind: FieldKind
    amount: Decimal
    date: CalendarDate
    raw_text: str = ""


@dataclass(frozen=True)
class QueryCommand:
    scope: QueryScope


Command = Union[UpdateCommand, QueryCommand]


@dataclass(frozen=True)
class MonthLayout:
    month: int
    year: int
    start_row: int
    end_row: int
    column_offset: int

    @property
    def days_in_month(self) -> int:
        return self.end_row - self.start_row + 1


@dataclass(frozen=True)
class CellCoordinate:
    column_letter: str
    row: int

    def __str__(self) -> str:
        return f"{self.column_letter}{self.row}"


@dataclass(frozen=True)
class DayRecord:
    day: int
    month: int
    year: int
    entrada: Decimal = Decimal("0")
    saida: Decimal = Decimal("0")
    diario: Decimal = Decimal("0")
    saldo: Decimal = Decimal("0")

    @property
    def date(self) -> CalendarDate:
        return CalendarDate(self.day, self.month, self.year)

    @property
    def has_data(self) -> bool:
        """Considera o dia preenchido se algum dos três movimentos não for zero."""
        return any(value != 0 for value in (self.entrada, self.saida, self.diario))


@dataclass(frozen=True)
class PeriodSummary:
    scope: QueryScope
    label: str
    total_entrada: Decimal
    total_saida: Decimal
    total_diario: Decimal
    closing_saldo: Decimal
    days_counted: int
    day_records: Tuple[DayRecord, ...] = field(default_factory=tuple)
    average: Optional[Decimal] = None

# src/core/reports.py
import asyncio
import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from src.core.layout import cell_address, month_layout
from src.core.models import (
    CalendarDate,
    CellCoordinate,
    DayRecord,
    FieldKind,
    PeriodSummary,
    QueryScope,
)
from src.core.sheets import SheetIO
from src.utils.money_utils import parse_cell_value

WEEK_DAYS = 7
VALUE_FIELDS = (FieldKind.ENTRADA, FieldKind.SAIDA, FieldKind.DIARIO, FieldKind.SALDO)


async def read_cells(sheet: SheetIO, coordinates: Sequence[CellCoordinate]) -> Dict[CellCoordinate, Optional[str]]:
    """Lê as células de uma vez: batch_read se a planilha oferecer, senão leituras simultâneas."""
    batch_read = getattr(sheet, "batch_read", None)
    if batch_read is not None:
        return await batch_read(coordinates)

    values = await asyncio.gather(*(sheet.read_cell(coordinate) for coordinate in coordinates))
    return dict(zip(coordinates, values))


async def day_report(sheet: SheetIO, date: CalendarDate) -> DayRecord:
    """Lê Entrada, Saída, Diário e Saldo de um dia. Levanta InvalidDateError se o dia não existe."""
    layout = month_layout(date.month, date.year)
    coordinates = {kind: cell_address(kind, date.day, layout) for kind in VALUE_FIELDS}

    raw_values = await read_cells(sheet, list(coordinates.values()))
    values = {kind: parse_cell_value(raw_values.get(coordinate)) for kind, coordinate in coordinates.items()}

    return DayRecord(
        day=date.day,
        month=date.month,
        year=date.year,
        entrada=values[FieldKind.ENTRADA],
        saida=values[FieldKind.SAIDA],
        diario=values[FieldKind.DIARIO],
        saldo=values[FieldKind.SALDO],
    )


def _sum(records: Sequence[DayRecord], attr: str) -> Decimal:
    return sum((getattr(record, attr) for record in records), Decimal("0"))


async def today_report(sheet: SheetIO, reference: datetime.date) -> PeriodSummary:
    record = await day_report(sheet, CalendarDate.from_date(reference))
    return PeriodSummary(
        scope=QueryScope.TODAY,
        label=f"Hoje ({reference.strftime('%d/%m/%Y')})",
        total_entrada=record.entrada,
        total_saida=record.saida,
        total_diario=record.diario,
        closing_saldo=record.saldo,
        days_counted=1 if record.has_data else 0,
        day_records=(record,),
    )


async def week_report(sheet: SheetIO, reference: datetime.date) -> PeriodSummary:
    """Últimos 7 dias até a referência (inclusive), do mais antigo para o mais recente."""
    start = reference - datetime.timedelta(days=WEEK_DAYS - 1)
    records: List[DayRecord] = []
    for offset in range(WEEK_DAYS):
        current = start + datetime.timedelta(days=offset)
        records.append(await day_report(sheet, CalendarDate.from_date(current)))

    total_entrada = _sum(records, "entrada")
    total_saida = _sum(records, "saida")
    total_diario = _sum(records, "diario")

    return PeriodSummary(
        scope=QueryScope.WEEK,
        label=f"Semana ({start.strftime('%d/%m')} a {reference.strftime('%d/%m/%Y')})",
        total_entrada=total_entrada,
        total_saida=total_saida,
        total_diario=total_diario,
        # O saldo da planilha é acumulado: vale o do último dia, não a soma
        closing_saldo=records[-1].saldo,
        days_counted=sum(1 for record in records if record.has_data),
        day_records=tuple(records),
        average=(total_entrada + total_saida + total_diario) / WEEK_DAYS,
    )


async def month_report(sheet: SheetIO, reference: datetime.date) -> PeriodSummary:
    """Do dia 1 até o dia de referência do mês corrente."""
    records: List[DayRecord] = []
    for day in range(1, reference.day + 1):
        records.append(await day_report(sheet, CalendarDate(day=day, month=reference.month, year=reference.year)))

    total_entrada = _sum(records, "entrada")
    total_saida = _sum(records, "saida")
    total_diario = _sum(records, "diario")
    days_with_data = sum(1 for record in records if record.has_data)

    layout = month_layout(reference.month, reference.year)
    saldo_cell = cell_address(FieldKind.SALDO, reference.day, layout)
    closing_saldo = parse_cell_value(await sheet.read_cell(saldo_cell))

    average = None
    if days_with_data:
        average = (total_entrada + total_saida + total_diario) / days_with_data

    return PeriodSummary(
        scope=QueryScope.MONTH,
        label=f"Mês {reference.strftime('%m/%Y')}",
        total_entrada=total_entrada,
        total_saida=total_saida,
        total_diario=total_diario,
        closing_saldo=closing_saldo,
        days_counted=days_with_data,
        day_records=tuple(records),
        average=average,
    )


REPORTS = {
    QueryScope.TODAY: today_report,
    QueryScope.WEEK: week_report,
    QueryScope.MONTH: month_report,
}


async def run_query(sheet: SheetIO, scope: QueryScope, reference: datetime.date) -> PeriodSummary:
    return await REPORTS[scope](sheet, reference)

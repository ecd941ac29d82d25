# src/core/updater.py
import logging

from src.core.layout import cell_address, month_layout
from src.core.models import CellCoordinate, UpdateCommand
from src.core.sheets import SheetIO
from src.utils.money_utils import format_brl

logger = logging.getLogger(__name__)


async def register_value(sheet: SheetIO, command: UpdateCommand) -> CellCoordinate:
    """
    Escreve o valor do comando na célula do campo/dia correspondente.
    Levanta InvalidDateError se o dia não existe no mês e ExternalServiceError se a escrita falhar.
    """
    layout = month_layout(command.date.month, command.date.year)
    coordinate = cell_address(command.kind, command.date.day, layout)

    # Sobrescreve a célula com o valor no formato brasileiro
    await sheet.write_cell(coordinate, format_brl(command.amount))
    logger.info("%s de %s registrado em %s (%s)", command.kind.label, command.amount, coordinate, command.date)
    return coordinate

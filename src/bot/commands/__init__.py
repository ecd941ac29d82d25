# src/bot/commands/__init__.py

from .utils import start_command, help_command
from .balance import saldo_command, semana_command, mes_command
from .chart import grafico_command

ALL_COMMANDS = [
    start_command,
    help_command,
    saldo_command,
    semana_command,
    mes_command,
    grafico_command,
]

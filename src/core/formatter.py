# src/core/formatter.py
from decimal import Decimal

from src.core.errors import InvalidDateError
from src.core.models import CellCoordinate, DayRecord, PeriodSummary, QueryScope, UpdateCommand
from src.utils.money_utils import format_brl

NOT_AVAILABLE = "N/D"


def saldo_annotation(saldo: Decimal) -> str:
    if saldo > 0:
        return "✅ Saldo positivo! Continue assim! 💪"
    if saldo < 0:
        return "⚠️ Saldo negativo. Atenção com os gastos! 🧐"
    return "➖ Saldo zerado."


def format_update_confirmation(command: UpdateCommand, coordinate: CellCoordinate) -> str:
    """Ex: "✅ Diário de R$ 87,10 registrado para 01/01/2025" seguido da célula alterada."""
    return (
        f"✅ {command.kind.label} de {format_brl(command.amount)} registrado para {command.date}\n"
        f"📍 Célula: {coordinate}"
    )


def format_day_report(record: DayRecord) -> str:
    return (
        f"📅 *Resumo de {record.date}*\n\n"
        f"💰 Entrada: {format_brl(record.entrada)}\n"
        f"💸 Saída: {format_brl(record.saida)}\n"
        f"🛒 Diário: {format_brl(record.diario)}\n"
        f"🏦 Saldo: *{format_brl(record.saldo)}*\n\n"
        f"{saldo_annotation(record.saldo)}"
    )


def format_period_report(summary: PeriodSummary) -> str:
    if summary.scope == QueryScope.TODAY and len(summary.day_records) == 1:
        return format_day_report(summary.day_records[0])

    average = format_brl(summary.average) if summary.average is not None else NOT_AVAILABLE
    return (
        f"📊 *Resumo: {summary.label}*\n\n"
        f"💰 Entradas: {format_brl(summary.total_entrada)}\n"
        f"💸 Saídas: {format_brl(summary.total_saida)}\n"
        f"🛒 Diário: {format_brl(summary.total_diario)}\n"
        f"📆 Dias com movimento: {summary.days_counted}\n"
        f"📈 Média diária: {average}\n"
        f"🏦 Saldo final: *{format_brl(summary.closing_saldo)}*\n\n"
        f"{saldo_annotation(summary.closing_saldo)}"
    )


def format_invalid_date(error: InvalidDateError) -> str:
    return f"❌ Dia inválido: o mês {error.month}/{error.year} só tem {error.max_day} dias."


def format_service_error() -> str:
    return "❌ Não consegui acessar a planilha agora. Tente novamente em instantes. 😟"


def format_unexpected_error() -> str:
    return "❌ Erro ao processar sua mensagem. Tente novamente mais tarde. 😟"


def help_message() -> str:
    return (
        "🤖 *Bot de Controle Financeiro*\n\n"
        "📝 *Comandos disponíveis:*\n\n"
        "*DIÁRIO:*\n"
        "• diario 87,10\n"
        "• diario 400 amanha\n"
        "• diario 100 07/01\n"
        "• 517 (adiciona no diário de hoje)\n"
        "• 35 amanha\n\n"
        "*ENTRADA:*\n"
        "• entrada 352,91 01/01\n"
        "• entrada 200 hoje\n\n"
        "*SAÍDA:*\n"
        "• saida 94,90 hoje\n"
        "• saida 600 06/02\n\n"
        "*CONSULTAS:*\n"
        "• saldo (ou resumo/extrato) de hoje\n"
        "• saldo semana\n"
        "• saldo mes\n"
        "• /grafico para o gráfico do mês\n\n"
        "📅 *Datas aceitas:*\n"
        "• hoje\n"
        "• amanha\n"
        "• ontem\n"
        "• dd/mm\n"
        "• dd/mm/aaaa\n\n"
        "💡 *Dica:* Valores podem usar vírgula ou ponto como decimal."
    )

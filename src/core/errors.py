# src/core/errors.py


class InvalidDateError(Exception):
    """O dia pedido não existe no mês/ano (ex: 31/04)."""

    def __init__(self, month: int, year: int, day: int, max_day: int):
        self.month = month
        self.year = year
        self.day = day
        self.max_day = max_day
        super().__init__(f"O mês {month}/{year} só tem {max_day} dias (recebido: {day})")


class ExternalServiceError(Exception):
    """Falha ao ler ou escrever na planilha (rede, autenticação, cota)."""

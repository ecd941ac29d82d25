# src/utils/money_utils.py
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional, Union

CENTS = Decimal("0.01")
THOUSANDS_PATTERN = re.compile(r"-?[1-9]\d{0,2}(?:\.\d{3})+$")


def normalize_amount(raw: str) -> Optional[Decimal]:
    """
    Converte um valor digitado pelo usuário em Decimal.
    Vírgula vira ponto; se sobrar mais de um ponto, só o último é decimal (1.234,56 -> 1234.56).
    Retorna None se não for um número finito.
    """
    normalized = raw.strip().replace(",", ".")

    parts = normalized.split(".")
    if len(parts) > 2:
        normalized = "".join(parts[:-1]) + "." + parts[-1]

    try:
        value = Decimal(normalized)
    except InvalidOperation:
        return None

    if not value.is_finite():
        return None
    return value


def parse_cell_value(value: Union[str, int, float, None]) -> Decimal:
    """
    Lê o texto de uma célula da planilha ("R$ 1.234,56", "-R$ 10,00", "R$ (10,00)", "87,1") como Decimal.
    Célula vazia ou com lixo vale 0: o relatório nunca quebra por uma célula mal formatada.
    """
    if value is None:
        return Decimal("0")

    # A API às vezes já devolve número
    if isinstance(value, (int, float)):
        return Decimal(str(value))

    text = str(value).replace("R$", "").strip()
    # Formato contábil: (10,00) é negativo
    negative = text.startswith("(") and text.endswith(")")

    s = re.sub(r"[^0-9.,\-]", "", text)
    if not s or s == "-":
        return Decimal("0")

    if "," in s:
        # Formato brasileiro: 7.000,00
        s = s.replace(".", "").replace(",", ".")
    elif s.count(".") > 1 or THOUSANDS_PATTERN.match(s):
        # Só separador de milhar: 1.234 ou 1.234.567
        s = s.replace(".", "")

    try:
        parsed = Decimal(s)
    except InvalidOperation:
        return Decimal("0")
    if not parsed.is_finite():
        return Decimal("0")
    return -abs(parsed) if negative else parsed


def format_brl(value: Decimal) -> str:
    """87.5 -> "R$ 87,50" """
    value = Decimal(value)
    with localcontext() as ctx:
        # Valores enormes passam do limite padrão de 28 dígitos do quantize
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        quantized = value.quantize(CENTS, rounding=ROUND_HALF_UP)
        return "R$ " + f"{quantized:.2f}".replace(".", ",")

# tests/test_parser.py
import datetime
import unittest
from decimal import Decimal

from src.core.models import CalendarDate, FieldKind, QueryCommand, QueryScope, UpdateCommand
from src.core.parser import parse_command


class TestParseCommand(unittest.TestCase):

    def setUp(self):
        self.reference = datetime.date(2025, 3, 15)
        self.today = CalendarDate(day=15, month=3, year=2025)

    def assertUpdate(self, command, kind, amount, date):
        self.assertIsInstance(command, UpdateCommand)
        self.assertEqual(command.kind, kind)
        self.assertEqual(command.amount, Decimal(amount))
        self.assertEqual(command.date, date)

    # --- Lançamentos ---
    def test_diario(self):
        command = parse_command("diario 87,10", self.reference)
        self.assertUpdate(command, FieldKind.DIARIO, "87.10", self.today)
        self.assertEqual(command.raw_text, "diario 87,10")

    def test_entrada_with_date(self):
        command = parse_command("entrada 352,91 01/01", self.reference)
        self.assertUpdate(command, FieldKind.ENTRADA, "352.91", CalendarDate(1, 1, 2025))

    def test_bare_number_is_diario(self):
        self.assertUpdate(parse_command("517", self.reference), FieldKind.DIARIO, "517", self.today)

    def test_saida_with_accent(self):
        command = parse_command("Saída 94,90 hoje", self.reference)
        self.assertUpdate(command, FieldKind.SAIDA, "94.90", self.today)

    def test_amanha(self):
        self.assertUpdate(
            parse_command("diario 400 amanha", self.reference), FieldKind.DIARIO, "400", CalendarDate(16, 3, 2025)
        )
        self.assertUpdate(parse_command("35 amanhã", self.reference), FieldKind.DIARIO, "35", CalendarDate(16, 3, 2025))

    def test_token_order_does_not_matter(self):
        command = parse_command("01/01 entrada 352,91", self.reference)
        self.assertUpdate(command, FieldKind.ENTRADA, "352.91", CalendarDate(1, 1, 2025))

    def test_full_date_is_not_taken_as_amount(self):
        command = parse_command("diario 100 07/01/2024", self.reference)
        self.assertUpdate(command, FieldKind.DIARIO, "100", CalendarDate(7, 1, 2024))

    def test_date_inside_longer_number_is_not_a_date(self):
        self.assertUpdate(parse_command("diario 100/01", self.reference), FieldKind.DIARIO, "100", self.today)

    def test_thousands_separator(self):
        self.assertUpdate(parse_command("entrada 1.234,56", self.reference), FieldKind.ENTRADA, "1234.56", self.today)

    def test_day_outside_month_is_kept_for_reporting(self):
        command = parse_command("entrada 10 31/04", self.reference)
        self.assertEqual(command.date, CalendarDate(31, 4, 2025))

    def test_entrada_wins_over_saida(self):
        self.assertEqual(parse_command("entrada saida 10", self.reference).kind, FieldKind.ENTRADA)

    # --- Consultas ---
    def test_query_today(self):
        self.assertEqual(parse_command("saldo", self.reference), QueryCommand(QueryScope.TODAY))
        self.assertEqual(parse_command("Resumo hoje", self.reference), QueryCommand(QueryScope.TODAY))
        self.assertEqual(parse_command("extrato hj", self.reference), QueryCommand(QueryScope.TODAY))

    def test_query_week(self):
        self.assertEqual(parse_command("saldo semana", self.reference), QueryCommand(QueryScope.WEEK))
        self.assertEqual(parse_command("RESUMO SEMANAL", self.reference), QueryCommand(QueryScope.WEEK))

    def test_query_month(self):
        self.assertEqual(parse_command("saldo mês", self.reference), QueryCommand(QueryScope.MONTH))
        self.assertEqual(parse_command("extrato mes", self.reference), QueryCommand(QueryScope.MONTH))
        self.assertEqual(parse_command("resumo mensal", self.reference), QueryCommand(QueryScope.MONTH))

    # --- Mensagens não reconhecidas ---
    def test_empty_messages(self):
        self.assertIsNone(parse_command("", self.reference))
        self.assertIsNone(parse_command("   ", self.reference))

    def test_no_amount(self):
        self.assertIsNone(parse_command("oi, tudo bem?", self.reference))
        self.assertIsNone(parse_command("entrada hoje", self.reference))
        self.assertIsNone(parse_command("diario 01/01", self.reference))

    def test_default_reference_is_today(self):
        command = parse_command("diario 5")
        self.assertEqual(command.date, CalendarDate.from_date(datetime.date.today()))


if __name__ == "__main__":
    unittest.main()

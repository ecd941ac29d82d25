# tests/test_money_utils.py
import unittest
from decimal import Decimal

from src.utils.money_utils import format_brl, normalize_amount, parse_cell_value


class TestNormalizeAmount(unittest.TestCase):
    def test_decimal_comma(self):
        self.assertEqual(normalize_amount("87,10"), Decimal("87.10"))

    def test_decimal_point(self):
        self.assertEqual(normalize_amount("87.10"), Decimal("87.10"))

    def test_integer(self):
        self.assertEqual(normalize_amount("517"), Decimal("517"))

    def test_brazilian_thousands(self):
        self.assertEqual(normalize_amount("1.234,56"), Decimal("1234.56"))
        self.assertEqual(normalize_amount("1.234.567,89"), Decimal("1234567.89"))

    def test_not_a_number(self):
        self.assertIsNone(normalize_amount(""))
        self.assertIsNone(normalize_amount("abc"))


class TestParseCellValue(unittest.TestCase):
    def test_empty_cells_are_zero(self):
        self.assertEqual(parse_cell_value(None), Decimal("0"))
        self.assertEqual(parse_cell_value(""), Decimal("0"))
        self.assertEqual(parse_cell_value("R$ -"), Decimal("0"))

    def test_currency_text(self):
        self.assertEqual(parse_cell_value("R$ 87,10"), Decimal("87.10"))
        self.assertEqual(parse_cell_value("R$ 1.234,56"), Decimal("1234.56"))

    def test_negative_values(self):
        self.assertEqual(parse_cell_value("-R$ 10,50"), Decimal("-10.50"))
        self.assertEqual(parse_cell_value("R$ -10,50"), Decimal("-10.50"))

    def test_accounting_negative(self):
        self.assertEqual(parse_cell_value("R$ (10,00)"), Decimal("-10.00"))
        self.assertEqual(parse_cell_value("(1.234,50)"), Decimal("-1234.50"))

    def test_thousands_dots_without_comma(self):
        self.assertEqual(parse_cell_value("R$ 1.234"), Decimal("1234"))
        self.assertEqual(parse_cell_value("1.234.567"), Decimal("1234567"))
        self.assertEqual(parse_cell_value("R$ 1.234.567"), Decimal("1234567"))

    def test_plain_decimal_point_is_kept(self):
        self.assertEqual(parse_cell_value("12.5"), Decimal("12.5"))
        self.assertEqual(parse_cell_value("0.125"), Decimal("0.125"))

    def test_numbers_from_api(self):
        self.assertEqual(parse_cell_value(12.5), Decimal("12.5"))
        self.assertEqual(parse_cell_value(7), Decimal("7"))

    def test_malformed_cells_are_zero(self):
        self.assertEqual(parse_cell_value("#REF!"), Decimal("0"))
        self.assertEqual(parse_cell_value("TESTE"), Decimal("0"))
        self.assertEqual(parse_cell_value("1-2"), Decimal("0"))


class TestFormatBrl(unittest.TestCase):
    def test_two_decimals_with_comma(self):
        self.assertEqual(format_brl(Decimal("87.5")), "R$ 87,50")
        self.assertEqual(format_brl(Decimal("87.10")), "R$ 87,10")
        self.assertEqual(format_brl(Decimal("0")), "R$ 0,00")

    def test_rounding(self):
        self.assertEqual(format_brl(Decimal("1234.567")), "R$ 1234,57")

    def test_negative(self):
        self.assertEqual(format_brl(Decimal("-10")), "R$ -10,00")

    def test_amount_beyond_default_precision(self):
        self.assertEqual(format_brl(Decimal("9" * 29)), "R$ " + "9" * 29 + ",00")

    def test_written_value_reads_back(self):
        self.assertEqual(parse_cell_value(format_brl(Decimal("87.10"))), Decimal("87.10"))


if __name__ == "__main__":
    unittest.main()

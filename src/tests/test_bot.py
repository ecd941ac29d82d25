# tests/test_bot.py
import datetime
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from src.bot.access import is_allowed_chat
from src.bot.commands import grafico_command, mes_command, saldo_command
from src.bot.handlers import handle_initial_message
from src.core import formatter
from src.tests.fake_sheet import FailingSheet, InMemorySheet

TODAY = datetime.date(2025, 1, 2)


def make_update(text: str = "", chat_id: int = 123) -> MagicMock:
    update = MagicMock()
    update.message.text = text
    update.message.chat_id = chat_id
    update.message.reply_text = AsyncMock()
    update.message.reply_photo = AsyncMock()
    update.effective_chat.id = chat_id
    return update


def make_context(sheet) -> MagicMock:
    context = MagicMock()
    context.bot_data = {"sheets": sheet}
    return context


class TestAccess(unittest.TestCase):
    def test_open_mode(self):
        self.assertTrue(is_allowed_chat(make_update(), allowed_chats=[]))

    def test_restricted_mode(self):
        self.assertTrue(is_allowed_chat(make_update(chat_id=123), allowed_chats=["123"]))
        self.assertFalse(is_allowed_chat(make_update(chat_id=456), allowed_chats=["123"]))


@patch("src.bot.handlers.handle_initial_message.local_today", return_value=TODAY)
@patch("src.bot.handlers.handle_initial_message.is_allowed_chat", return_value=True)
class TestHandleInitialMessage(unittest.IsolatedAsyncioTestCase):

    async def test_writes_and_replies(self, mock_allowed, mock_today):
        sheet = InMemorySheet()
        update = make_update("diario 87,10")

        await handle_initial_message(update, make_context(sheet))

        self.assertEqual(sheet.writes, [("E7", "R$ 87,10")])
        reply = update.message.reply_text.call_args[0][0]
        self.assertTrue(reply.startswith("✅ Diário de R$ 87,10 registrado para 02/01/2025"))

    async def test_unknown_text_gets_help(self, mock_allowed, mock_today):
        update = make_update("bom dia")
        await handle_initial_message(update, make_context(InMemorySheet()))
        self.assertEqual(update.message.reply_text.call_args[0][0], formatter.help_message())

    async def test_ignores_unauthorized_chat(self, mock_allowed, mock_today):
        mock_allowed.return_value = False
        sheet = InMemorySheet()
        update = make_update("diario 10")

        await handle_initial_message(update, make_context(sheet))

        update.message.reply_text.assert_not_awaited()
        self.assertEqual(sheet.writes, [])


@patch("src.bot.commands.balance.is_allowed_chat", return_value=True)
@patch("src.bot.commands.balance.local_today", return_value=TODAY)
class TestBalanceCommands(unittest.IsolatedAsyncioTestCase):

    async def test_saldo_command(self, mock_today, mock_allowed):
        update = make_update("/saldo")
        await saldo_command(update, make_context(InMemorySheet({"F7": "R$ 10,00"})))
        reply = update.message.reply_text.call_args[0][0]
        self.assertIn("Resumo de 02/01/2025", reply)
        self.assertIn("R$ 10,00", reply)

    async def test_mes_command(self, mock_today, mock_allowed):
        update = make_update("/mes")
        await mes_command(update, make_context(InMemorySheet({"C6": "R$ 100,00"})))
        reply = update.message.reply_text.call_args[0][0]
        self.assertIn("Mês 01/2025", reply)
        self.assertIn("Entradas: R$ 100,00", reply)

    async def test_service_error(self, mock_today, mock_allowed):
        update = make_update("/mes")
        with self.assertLogs("src.bot.commands.balance", level="ERROR"):
            await mes_command(update, make_context(FailingSheet()))
        update.message.reply_text.assert_awaited_once_with(formatter.format_service_error())


@patch("src.bot.commands.chart.is_allowed_chat", return_value=True)
@patch("src.bot.commands.chart.local_today", return_value=TODAY)
class TestGraficoCommand(unittest.IsolatedAsyncioTestCase):

    async def test_sends_photo(self, mock_today, mock_allowed):
        update = make_update("/grafico")
        await grafico_command(update, make_context(InMemorySheet({"C6": "R$ 100,00", "F6": "R$ 100,00"})))
        update.message.reply_photo.assert_awaited_once()
        photo = update.message.reply_photo.call_args.kwargs["photo"]
        self.assertEqual(photo.name, "grafico_mes.png")

    async def test_without_data(self, mock_today, mock_allowed):
        update = make_update("/grafico")
        await grafico_command(update, make_context(InMemorySheet()))
        update.message.reply_photo.assert_not_awaited()
        self.assertEqual(update.message.reply_text.await_count, 2)


if __name__ == "__main__":
    unittest.main()

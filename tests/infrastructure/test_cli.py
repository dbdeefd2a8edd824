"""End-to-end tests for the command line, using click's test runner."""

from click.testing import CliRunner

from cinema.infrastructure.cli import ticket_commands
from cinema.infrastructure.cli.main import cli
from tests.fakes import FakeSeatReservationService, FakeTicketPaymentService


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestPurchaseCommand:

    def test_purchase_reports_payment_and_seats(self):
        result = _run("purchase", "--account", "123", "--tickets", "ADULT:2,CHILD:1")
        assert result.exit_code == 0, result.output
        assert "Account #123: paid 50, reserved 3 seat(s)." in result.output

    def test_purchase_works_with_any_gateway(self, monkeypatch):
        journal: list[tuple] = []
        monkeypatch.setattr(
            ticket_commands, "payment_service", lambda: FakeTicketPaymentService(journal)
        )
        monkeypatch.setattr(
            ticket_commands, "reservation_service", lambda: FakeSeatReservationService(journal)
        )
        result = _run("purchase", "--account", "9", "--tickets", "ADULT:1,INFANT:1")
        assert result.exit_code == 0, result.output
        assert "Account #9: paid 20, reserved 1 seat(s)." in result.output
        assert journal == [("make_payment", 9, 20), ("reserve_seat", 9, 1)]

    def test_purchase_error_shows_code(self):
        result = _run("purchase", "--account", "123", "--tickets", "CHILD:1,INFANT:1")
        assert result.exit_code == 1
        assert "MISSING_ADULT_TICKET" in result.output

    def test_invalid_account(self):
        result = _run("purchase", "--account", "0", "--tickets", "ADULT:2")
        assert result.exit_code == 1
        assert "INVALID_ACCOUNT_ID" in result.output

    def test_unknown_ticket_type(self):
        result = _run("purchase", "--account", "1", "--tickets", "SENIOR:1")
        assert result.exit_code == 2
        assert "Unknown ticket type" in result.output

    def test_malformed_tickets(self):
        result = _run("purchase", "--account", "1", "--tickets", "ADULT")
        assert result.exit_code == 2
        assert "Expected 'TicketType:Quantity'" in result.output

    def test_non_numeric_quantity(self):
        result = _run("purchase", "--account", "1", "--tickets", "ADULT:two")
        assert result.exit_code == 2
        assert "Invalid quantity 'two'" in result.output


class TestQuoteCommand:

    def test_quote_prints_totals(self):
        result = _run("quote", "--tickets", "adult:2,infant:1")
        assert result.exit_code == 0, result.output
        assert "ADULT" in result.output
        assert "40" in result.output

    def test_quote_prints_ticket_count(self):
        result = _run("quote", "--tickets", "ADULT:2,CHILD:1,INFANT:1")
        assert result.exit_code == 0, result.output
        tickets_row = [l for l in result.output.splitlines() if "Tickets" in l]
        assert tickets_row and tickets_row[0].split()[-1] == "4"

    def test_quote_limit_exceeded(self):
        result = _run("quote", "--tickets", "ADULT:21")
        assert result.exit_code == 1
        assert "MAX_TICKETS_EXCEEDED" in result.output


class TestPricesCommand:

    def test_lists_every_type(self):
        result = _run("prices")
        assert result.exit_code == 0
        for name in ("ADULT", "CHILD", "INFANT"):
            assert name in result.output
        assert "At most 20 tickets" in result.output

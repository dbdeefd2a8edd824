"""CLI commands for buying and pricing tickets."""

from __future__ import annotations

import click

from cinema.application.purchase_tickets import PurchaseTicketsHandler
from cinema.application.quote_tickets import QuoteTicketsHandler
from cinema.domain.exceptions import DomainException, InvalidPurchaseError
from cinema.domain.model.ticket import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_PRICES,
    TicketTypeRequest,
)
from cinema.infrastructure.bootstrap import payment_service, reservation_service


def _parse_tickets(raw: str) -> list[TicketTypeRequest]:
    """Parse 'ADULT:2,CHILD:1' into TicketTypeRequest list."""
    requests: list[TicketTypeRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid ticket format '{pair}'. Expected 'TicketType:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for ticket type '{name}'."
            )
        try:
            requests.append(TicketTypeRequest.of(name, qty))
        except DomainException as exc:
            raise click.BadParameter(str(exc))
    return requests


def _fail(exc: DomainException) -> click.ClickException:
    if isinstance(exc, InvalidPurchaseError):
        return click.ClickException(f"{exc.code.value}: {exc}")
    return click.ClickException(str(exc))


@click.command("prices")
def ticket_prices() -> None:
    """Show the ticket price table."""
    click.echo(f"{'Type':<10} {'Price':>8}")
    click.echo("-" * 19)
    for ticket_type, price in TICKET_PRICES.items():
        click.echo(f"{ticket_type.value:<10} {price:>8}")
    click.echo()
    click.echo(f"At most {MAX_TICKETS_PER_PURCHASE} tickets per purchase.")


@click.command("quote")
@click.option("--account", "account_id", default=1, show_default=True, type=int, help="Account ID.")
@click.option("--tickets", required=True, help="Tickets as 'Type:Qty,Type:Qty'.")
def ticket_quote(account_id: int, tickets: str) -> None:
    """Price an order without paying for it."""
    requests = _parse_tickets(tickets)
    handler = QuoteTicketsHandler()

    try:
        dto = handler.handle(account_id, requests)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"  {'Type':<10} {'Qty':>5} {'Price':>8} {'Total':>8}")
    click.echo(f"  {'-'*34}")
    for line in dto.lines:
        click.echo(
            f"  {line.ticket_type:<10} {line.quantity:>5} {line.unit_price:>8} {line.line_total:>8}"
        )
    click.echo(f"  {'-'*34}")
    click.echo(f"  {'Total':<16} {dto.total_price:>17}")
    click.echo(f"  {'Seats':<16} {dto.total_seats:>17}")
    click.echo(f"  {'Tickets':<16} {dto.ticket_count:>17}")


@click.command("purchase")
@click.option("--account", "account_id", required=True, type=int, help="Account ID.")
@click.option("--tickets", required=True, help="Tickets as 'Type:Qty,Type:Qty'.")
def ticket_purchase(account_id: int, tickets: str) -> None:
    """Buy tickets: take payment, then reserve seats."""
    requests = _parse_tickets(tickets)
    handler = PurchaseTicketsHandler(payment_service(), reservation_service())

    try:
        handler.handle(account_id, requests)
    except DomainException as exc:
        raise _fail(exc)

    # The purchase above already passed these rules.
    dto = QuoteTicketsHandler().handle(account_id, requests)
    click.echo(
        f"Account #{account_id}: paid {dto.total_price}, "
        f"reserved {dto.total_seats} seat(s)."
    )

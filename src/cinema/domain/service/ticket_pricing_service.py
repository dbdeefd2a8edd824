"""Domain service: Ticket Pricing.

Decides whether a ticket order is admissible and, if it is, what it
costs and how many seats it takes.  It never talks to the payment or
seat gateways; the application handler does that with the summary this
service returns.

Rules are checked fail-fast: the first violation raises and nothing is
accumulated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from cinema.domain.exceptions import InvalidPurchaseError, PurchaseErrorCode
from cinema.domain.model.ticket import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_PRICES,
    TicketType,
    TicketTypeRequest,
)


@dataclass(frozen=True)
class PurchaseSummary:
    """Totals of an accepted order.

    ``ticket_count`` includes infants; ``total_seats`` does not.
    """

    total_price: int
    total_seats: int
    ticket_count: int


class TicketPricingService:

    def __init__(
        self,
        prices: Mapping[TicketType, int] = TICKET_PRICES,
        max_tickets: int = MAX_TICKETS_PER_PURCHASE,
    ) -> None:
        self._prices = prices
        self._max_tickets = max_tickets

    def unit_price(self, ticket_type: TicketType) -> int:
        return self._prices.get(ticket_type, 0)

    def price(
        self,
        account_id: int,
        requests: Iterable[TicketTypeRequest] | None,
    ) -> PurchaseSummary:
        """Validate an order and compute its totals.

        The purchase limit is checked line by line against the seats
        accumulated so far plus the quantity on the current line, so
        infants are compared but never added to the running total.
        """
        lines = self._validate_purchase_request(account_id, requests)

        has_adult = False
        has_child_or_infant = False
        total_price = 0
        total_seats = 0
        ticket_count = 0

        for request in lines:
            quantity = request.quantity
            ticket_type = request.ticket_type

            if quantity < 0:
                raise InvalidPurchaseError(
                    PurchaseErrorCode.INVALID_TICKET_QUANTITY,
                    f"Invalid ticket quantity: {quantity}",
                )

            if total_seats + quantity > self._max_tickets:
                raise InvalidPurchaseError(
                    PurchaseErrorCode.MAX_TICKETS_EXCEEDED,
                    f"Maximum {self._max_tickets} tickets can be purchased at a time",
                )

            total_price += quantity * self.unit_price(ticket_type)
            ticket_count += quantity

            if ticket_type is TicketType.ADULT:
                has_adult = True
            else:
                has_child_or_infant = True

            if ticket_type.occupies_seat:
                total_seats += quantity

        if has_child_or_infant and not has_adult:
            raise InvalidPurchaseError(
                PurchaseErrorCode.MISSING_ADULT_TICKET,
                "Child or infant tickets cannot be purchased without an adult ticket",
            )

        return PurchaseSummary(
            total_price=total_price,
            total_seats=total_seats,
            ticket_count=ticket_count,
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_purchase_request(
        account_id: int,
        requests: Iterable[TicketTypeRequest] | None,
    ) -> tuple[TicketTypeRequest, ...]:
        if (
            not isinstance(account_id, int)
            or isinstance(account_id, bool)
            or account_id <= 0
        ):
            raise InvalidPurchaseError(
                PurchaseErrorCode.INVALID_ACCOUNT_ID,
                "Invalid account id. An account id should be greater than zero",
            )

        lines = tuple(requests) if requests is not None else ()
        if not lines:
            raise InvalidPurchaseError(
                PurchaseErrorCode.MISSING_TICKET_REQUEST,
                "At least one ticket type request is required",
            )

        return lines

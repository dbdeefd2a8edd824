"""Application service: Purchase Tickets use case.

Orchestrates the pricing service and the two outbound gateways.  Payment
is always taken before seats are reserved.  Nothing is undone if the seat
reservation fails after a successful payment; the failure is logged and
propagated to the caller as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cinema.domain.exceptions import InvalidPurchaseError
from cinema.domain.model.ticket import TicketTypeRequest
from cinema.domain.port.seat_reservation_service import SeatReservationService
from cinema.domain.port.ticket_payment_service import TicketPaymentService
from cinema.domain.service.ticket_pricing_service import TicketPricingService

logger = logging.getLogger(__name__)


class PurchaseTicketsHandler:

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        pricing_service: TicketPricingService | None = None,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service
        self._pricing_service = pricing_service or TicketPricingService()

    def handle(
        self,
        account_id: int,
        requests: Iterable[TicketTypeRequest] | None,
    ) -> None:
        """Buy tickets for an account.

        Steps:
        1. Validate and price the order (fails before any gateway call).
        2. Take payment for the total price.
        3. Reserve seats for adults and children.

        Success is signalled by returning normally.
        """
        try:
            summary = self._pricing_service.price(account_id, requests)
        except InvalidPurchaseError as exc:
            logger.info(
                "[account=%s] purchase rejected: %s", account_id, exc.code.value
            )
            raise

        self._payment_service.make_payment(account_id, summary.total_price)

        try:
            self._reservation_service.reserve_seat(account_id, summary.total_seats)
        except Exception:
            logger.warning(
                "[account=%s] seat reservation failed after payment of %s; "
                "payment was not refunded",
                account_id,
                summary.total_price,
            )
            raise

        logger.info(
            "[account=%s] purchase completed: paid=%s seats=%s",
            account_id,
            summary.total_price,
            summary.total_seats,
        )

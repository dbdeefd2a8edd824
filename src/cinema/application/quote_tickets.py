"""Application service: Quote Tickets use case (query).

Runs the same rules as a purchase but never charges or reserves.
"""

from __future__ import annotations

from collections.abc import Iterable

from cinema.application.dto import PurchaseQuoteDTO, QuoteLineDTO
from cinema.domain.model.ticket import TicketTypeRequest
from cinema.domain.service.ticket_pricing_service import TicketPricingService


class QuoteTicketsHandler:

    def __init__(self, pricing_service: TicketPricingService | None = None) -> None:
        self._pricing_service = pricing_service or TicketPricingService()

    def handle(
        self,
        account_id: int,
        requests: Iterable[TicketTypeRequest] | None,
    ) -> PurchaseQuoteDTO:
        if requests is not None:
            requests = tuple(requests)
        summary = self._pricing_service.price(account_id, requests)

        lines = []
        for request in requests or ():
            unit_price = self._pricing_service.unit_price(request.ticket_type)
            lines.append(
                QuoteLineDTO(
                    ticket_type=request.ticket_type.value,
                    quantity=request.quantity,
                    unit_price=unit_price,
                    line_total=unit_price * request.quantity,
                )
            )

        return PurchaseQuoteDTO(
            account_id=account_id,
            lines=lines,
            total_price=summary.total_price,
            total_seats=summary.total_seats,
            ticket_count=summary.ticket_count,
        )

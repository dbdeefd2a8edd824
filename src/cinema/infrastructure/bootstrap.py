"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from cinema.infrastructure.gateway.logging_payment_service import (
    LoggingTicketPaymentService,
)
from cinema.infrastructure.gateway.logging_seat_reservation_service import (
    LoggingSeatReservationService,
)


def payment_service() -> LoggingTicketPaymentService:
    return LoggingTicketPaymentService()


def reservation_service() -> LoggingSeatReservationService:
    return LoggingSeatReservationService()

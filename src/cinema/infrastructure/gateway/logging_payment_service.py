"""TicketPaymentService that only records and logs payments.

Stands in for a real payment provider when running from the command line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cinema.domain.port.ticket_payment_service import TicketPaymentService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentRecord:
    account_id: int
    amount: int


class LoggingTicketPaymentService(TicketPaymentService):

    def __init__(self) -> None:
        self.payments: list[PaymentRecord] = []

    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        self.payments.append(PaymentRecord(account_id, amount_to_pay))
        logger.info("[account=%s] payment taken: amount=%s", account_id, amount_to_pay)

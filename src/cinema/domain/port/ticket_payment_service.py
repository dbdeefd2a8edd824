"""Abstract payment gateway.

Defined in the domain layer so the domain never depends on a concrete
provider. Implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):

    @abstractmethod
    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        """Charge *amount_to_pay* to the account.

        Failures are raised by the implementation and are not translated
        by the caller.
        """

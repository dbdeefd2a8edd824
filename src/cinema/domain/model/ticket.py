"""Ticket value objects and the fixed purchase rules they are priced by."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from cinema.domain.exceptions import ValidationError


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def occupies_seat(self) -> bool:
        """Infants sit on an adult's lap."""
        return self is not TicketType.INFANT

    @staticmethod
    def parse(name: str) -> TicketType:
        try:
            return TicketType(name.strip().upper())
        except ValueError as exc:
            valid = ", ".join(t.value for t in TicketType)
            raise ValidationError(
                f"Unknown ticket type {name!r} (expected one of {valid})"
            ) from exc


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_TICKETS_PER_PURCHASE = 20

TICKET_PRICES = MappingProxyType({
    TicketType.INFANT: 0,
    TicketType.CHILD: 10,
    TicketType.ADULT: 20,
})


@dataclass(frozen=True)
class TicketTypeRequest:
    """One line of a purchase: how many tickets of a given type.

    The quantity is deliberately not checked here; a negative quantity is
    a purchase error and is reported by the pricing service.
    """

    ticket_type: TicketType
    quantity: int

    def __str__(self) -> str:
        return f"{self.ticket_type.value} x{self.quantity}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(ticket_type: str | TicketType, quantity: int) -> TicketTypeRequest:
        """Build a request from a type name such as ``"adult"``."""
        if not isinstance(ticket_type, TicketType):
            ticket_type = TicketType.parse(ticket_type)
        return TicketTypeRequest(ticket_type, quantity)

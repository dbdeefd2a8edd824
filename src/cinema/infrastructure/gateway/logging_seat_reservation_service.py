"""SeatReservationService that only records and logs reservations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cinema.domain.port.seat_reservation_service import SeatReservationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReservationRecord:
    account_id: int
    seats: int


class LoggingSeatReservationService(SeatReservationService):

    def __init__(self) -> None:
        self.reservations: list[ReservationRecord] = []

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.reservations.append(ReservationRecord(account_id, total_seats_to_allocate))
        logger.info(
            "[account=%s] seats reserved: seats=%s", account_id, total_seats_to_allocate
        )

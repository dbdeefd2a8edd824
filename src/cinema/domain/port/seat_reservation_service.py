"""Abstract seat booking gateway."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeatReservationService(ABC):

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve *total_seats_to_allocate* seats for the account."""

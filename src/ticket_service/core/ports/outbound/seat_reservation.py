from __future__ import annotations

from typing import Protocol


class SeatReservationService(Protocol):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None: ...

from __future__ import annotations

from dataclasses import dataclass

from ticket_service.core.domain.model.errors import ExternalServiceError
from ticket_service.core.ports.outbound.seat_reservation import SeatReservationService
from ticket_service.logging_config import logger

log = logger.bind(layer="seats")


@dataclass
class LoggingSeatReservationService(SeatReservationService):
    fail: bool = False

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        if self.fail:
            raise ExternalServiceError(
                message="seat booking is down", service="seat_reservation"
            )
        log.info(
            "reserve_seat: account_id={} seats={}", account_id, total_seats_to_allocate
        )

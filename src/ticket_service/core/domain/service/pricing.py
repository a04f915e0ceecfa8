from __future__ import annotations

from typing import Iterable

from ticket_service.core.domain.model.ticket import (
    TicketPrices,
    TicketType,
    TicketTypeRequest,
)


def compute_seats(requests: Iterable[TicketTypeRequest]) -> int:
    # infants sit on an adult's lap
    return sum(
        r.no_of_tickets for r in requests if r.ticket_type is not TicketType.INFANT
    )


def compute_cost(requests: Iterable[TicketTypeRequest], prices: TicketPrices) -> int:
    return sum(r.no_of_tickets * prices.price_of(r.ticket_type) for r in requests)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from ticket_service.core.domain.model.errors import InvalidTicketTypeRequest


class TicketType(str, Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """N tickets of one type. Validated on construction, immutable afterwards."""

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticket_type", _to_ticket_type(self.ticket_type))
        _check_no_of_tickets(self.no_of_tickets)

    def get_ticket_type(self) -> TicketType:
        return self.ticket_type

    def get_no_of_tickets(self) -> int:
        return self.no_of_tickets


@dataclass(frozen=True)
class PurchaseOrder:
    account_id: Any
    requests: Tuple[Any, ...]


@dataclass(frozen=True)
class PurchaseResult:
    no_of_seats: int
    total_cost: int


@dataclass(frozen=True)
class TicketPrices:
    adult: int = 20
    child: int = 10
    infant: int = 0

    def price_of(self, ticket_type: TicketType) -> int:
        if ticket_type is TicketType.ADULT:
            return self.adult
        if ticket_type is TicketType.CHILD:
            return self.child
        return self.infant

    def as_dict(self) -> dict[str, int]:
        return {t.value: self.price_of(t) for t in TicketType}


@dataclass(frozen=True)
class PurchasePolicy:
    prices: TicketPrices = TicketPrices()
    max_tickets: int = 20


def _to_ticket_type(value: object) -> TicketType:
    if isinstance(value, TicketType):
        return value
    if isinstance(value, str) and value in TicketType.__members__:
        return TicketType(value)
    allowed = ", ".join(t.value for t in TicketType)
    raise InvalidTicketTypeRequest(
        message=f"must be one of {allowed}, got {value!r}", field="ticket_type"
    )


def _check_no_of_tickets(value: object) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTicketTypeRequest(
            message=f"must be a whole number, got {value!r}", field="no_of_tickets"
        )
    if value <= 0:
        raise InvalidTicketTypeRequest(
            message=f"must be > 0, got {value}", field="no_of_tickets"
        )

"""Shared fixtures: recording stand-ins for the seat and payment services."""

from dataclasses import dataclass, field

import pytest
from loguru import logger

from ticket_service.core.domain.service.ticket_service import (
    TicketService,
    TicketServiceDeps,
)


@dataclass
class RecordingSeatReservation:
    calls: list = field(default_factory=list)
    error: Exception | None = None

    def reserve_seat(self, account_id, total_seats_to_allocate):
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))
        if self.error is not None:
            raise self.error


@dataclass
class RecordingPayment:
    calls: list = field(default_factory=list)
    error: Exception | None = None

    def make_payment(self, account_id, total_amount_to_pay):
        self.calls.append(("make_payment", account_id, total_amount_to_pay))
        if self.error is not None:
            raise self.error


@pytest.fixture
def calls():
    """One list shared by both fakes so call order can be asserted."""
    return []


@pytest.fixture
def seats(calls):
    return RecordingSeatReservation(calls=calls)


@pytest.fixture
def payment(calls):
    return RecordingPayment(calls=calls)


@pytest.fixture
def service(seats, payment):
    return TicketService(TicketServiceDeps(seat_reservation=seats, payment=payment))


@pytest.fixture(autouse=True)
def _drop_log_sinks():
    yield
    # sinks added by configure_logging hold on to the captured stderr
    logger.remove()

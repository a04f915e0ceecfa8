from __future__ import annotations

from fastapi import FastAPI

from ticket_service.adapters.inbound.web.fastapi_app import create_app
from ticket_service.adapters.outbound.logging_payment import (
    LoggingTicketPaymentService,
)
from ticket_service.adapters.outbound.logging_seat_reservation import (
    LoggingSeatReservationService,
)
from ticket_service.config import Settings
from ticket_service.core.domain.service.ticket_service import (
    TicketService,
    TicketServiceDeps,
)
from ticket_service.logging_config import configure_logging


def build_ticket_service(settings: Settings | None = None) -> TicketService:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    deps = TicketServiceDeps(
        seat_reservation=LoggingSeatReservationService(),
        payment=LoggingTicketPaymentService(),
    )
    return TicketService(deps, policy=settings.purchase_policy())


def create_asgi_app() -> FastAPI:
    return create_app(build_ticket_service())

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Sequence

from returns.pipeline import flow
from returns.pointfree import map_
from returns.result import Failure, Result

from ticket_service.core.domain.model.errors import PurchaseError
from ticket_service.core.domain.model.ticket import (
    PurchaseOrder,
    PurchasePolicy,
    PurchaseResult,
)
from ticket_service.core.domain.service.pricing import compute_cost, compute_seats
from ticket_service.core.domain.service.validation import validate_purchase
from ticket_service.core.ports.inbound.purchase_tickets import PurchaseTicketsUseCase
from ticket_service.core.ports.outbound.payment import TicketPaymentService
from ticket_service.core.ports.outbound.seat_reservation import SeatReservationService
from ticket_service.logging_config import logger

log = logger.bind(layer="core")


@dataclass(frozen=True)
class TicketServiceDeps:
    seat_reservation: SeatReservationService
    payment: TicketPaymentService


@dataclass(frozen=True)
class PurchaseContext:
    order: PurchaseOrder
    no_of_seats: int
    total_cost: int


@dataclass(frozen=True)
class TicketService(PurchaseTicketsUseCase):
    """Validates an order, reserves its seats, then takes payment.

    Neither collaborator is called for a rejected order. Errors raised by the
    collaborators are not caught, so a failed payment leaves the seats
    reserved.
    """

    deps: TicketServiceDeps
    policy: PurchasePolicy = field(default_factory=PurchasePolicy)

    def purchase_tickets(
        self, account_id: Any = None, *requests: Any
    ) -> PurchaseResult:
        result = self.try_purchase_tickets(account_id, requests)
        if isinstance(result, Failure):
            raise result.failure()
        return result.unwrap()

    def try_purchase_tickets(
        self, account_id: Any, requests: Sequence[Any]
    ) -> Result[PurchaseResult, PurchaseError]:
        order = PurchaseOrder(account_id=account_id, requests=tuple(requests))
        result = flow(
            order,
            partial(validate_purchase, max_tickets=self.policy.max_tickets),
            map_(self._price),
            map_(self._reserve_seats),
            map_(self._make_payment),
            map_(_to_result),
        )

        if isinstance(result, Failure):
            log.warning(
                "purchase rejected: account_id={!r} reason={}",
                account_id,
                result.failure(),
            )
        else:
            purchase = result.unwrap()
            log.info(
                "purchase completed: account_id={} seats={} cost={}",
                account_id,
                purchase.no_of_seats,
                purchase.total_cost,
            )
        return result

    def _price(self, order: PurchaseOrder) -> PurchaseContext:
        ctx = PurchaseContext(
            order=order,
            no_of_seats=compute_seats(order.requests),
            total_cost=compute_cost(order.requests, self.policy.prices),
        )
        log.debug(
            "order accepted: account_id={} tickets={} seats={} cost={}",
            order.account_id,
            sum(r.no_of_tickets for r in order.requests),
            ctx.no_of_seats,
            ctx.total_cost,
        )
        return ctx

    # ---- side effects ------------------------------------------------------

    def _reserve_seats(self, ctx: PurchaseContext) -> PurchaseContext:
        self.deps.seat_reservation.reserve_seat(ctx.order.account_id, ctx.no_of_seats)
        return ctx

    def _make_payment(self, ctx: PurchaseContext) -> PurchaseContext:
        self.deps.payment.make_payment(ctx.order.account_id, ctx.total_cost)
        return ctx


def _to_result(ctx: PurchaseContext) -> PurchaseResult:
    return PurchaseResult(no_of_seats=ctx.no_of_seats, total_cost=ctx.total_cost)

from __future__ import annotations

from functools import partial

from returns.result import Failure, Result, Success

from ticket_service.core.domain.model.errors import InvalidPurchase, PurchaseError
from ticket_service.core.domain.model.ticket import (
    PurchaseOrder,
    TicketType,
    TicketTypeRequest,
)


def validate_account_id(order: PurchaseOrder) -> Result[PurchaseOrder, PurchaseError]:
    account_id = order.account_id
    if not account_id:
        return Failure(InvalidPurchase("Account ID required"))
    if (
        isinstance(account_id, bool)
        or not isinstance(account_id, int)
        or account_id <= 0
    ):
        return Failure(InvalidPurchase("Account ID must be a positive whole number"))
    return Success(order)


def validate_requests(order: PurchaseOrder) -> Result[PurchaseOrder, PurchaseError]:
    if not order.requests:
        return Failure(InvalidPurchase("No ticket types provided"))
    for request in order.requests:
        if not isinstance(request, TicketTypeRequest):
            return Failure(InvalidPurchase("Invalid ticket type provided"))
    return Success(order)


def validate_ticket_ceiling(
    order: PurchaseOrder, max_tickets: int
) -> Result[PurchaseOrder, PurchaseError]:
    total = sum(r.no_of_tickets for r in order.requests)
    if total > max_tickets:
        return Failure(
            InvalidPurchase(
                f"Number of tickets ordered exceeds the maximum of {max_tickets}"
            )
        )
    return Success(order)


def validate_adult_present(
    order: PurchaseOrder,
) -> Result[PurchaseOrder, PurchaseError]:
    adults = sum(
        r.no_of_tickets for r in order.requests if r.ticket_type is TicketType.ADULT
    )
    if adults == 0:
        return Failure(
            InvalidPurchase(
                "Cannot order child or infant tickets without ordering an adult ticket"
            )
        )
    return Success(order)


def validate_purchase(
    order: PurchaseOrder, max_tickets: int
) -> Result[PurchaseOrder, PurchaseError]:
    """Run the purchase rules in order; the first one that fails is reported."""
    return (
        Success(order)
        .bind(validate_account_id)
        .bind(validate_requests)
        .bind(partial(validate_ticket_ceiling, max_tickets=max_tickets))
        .bind(validate_adult_present)
    )

"""End-to-end tests for TicketService against recording collaborators."""

import dataclasses

import pytest
from returns.result import Failure, Success

from ticket_service.core.domain.model.errors import (
    ExternalServiceError,
    InvalidPurchase,
)
from ticket_service.core.domain.model.ticket import (
    PurchasePolicy,
    PurchaseResult,
    TicketPrices,
    TicketTypeRequest,
)
from ticket_service.core.domain.service.ticket_service import (
    TicketService,
    TicketServiceDeps,
)


def _requests(adults=0, children=0, infants=0):
    counts = {"ADULT": adults, "CHILD": children, "INFANT": infants}
    return [TicketTypeRequest(t, n) for t, n in counts.items() if n]


class TestPurchaseTickets:
    @pytest.mark.parametrize(
        "adults,children,infants,expected_seats,cost",
        [
            (1, 0, 0, 1, 20),
            (1, 1, 0, 2, 30),
            (1, 1, 1, 2, 30),
            (6, 10, 3, 16, 220),
        ],
    )
    def test_returns_seats_and_cost(
        self, service, adults, children, infants, expected_seats, cost
    ):
        result = service.purchase_tickets(1, *_requests(adults, children, infants))
        assert result == PurchaseResult(no_of_seats=expected_seats, total_cost=cost)

    def test_reserves_then_pays(self, service, calls):
        service.purchase_tickets(7, *_requests(adults=2, infants=1))
        assert calls == [("reserve_seat", 7, 2), ("make_payment", 7, 40)]

    def test_duplicate_types_are_summed(self, service):
        result = service.purchase_tickets(
            1, TicketTypeRequest("ADULT", 1), TicketTypeRequest("ADULT", 2)
        )
        assert result == PurchaseResult(no_of_seats=3, total_cost=60)

    def test_exactly_the_maximum_is_allowed(self, service):
        result = service.purchase_tickets(1, *_requests(adults=10, children=10))
        assert result == PurchaseResult(no_of_seats=20, total_cost=300)


class TestRejectedPurchases:
    @pytest.mark.parametrize(
        "account_id,requests",
        [
            (1, _requests(adults=21)),
            (1, _requests(children=1)),
            (1, _requests(infants=2)),
            (1, []),
            (1, ["ADULT"]),
            (0, _requests(adults=1)),
            (None, _requests(adults=1)),
            (-1, _requests(adults=1)),
            ("1", _requests(adults=1)),
        ],
    )
    def test_raises_invalid_purchase_without_side_effects(
        self, service, calls, account_id, requests
    ):
        with pytest.raises(InvalidPurchase):
            service.purchase_tickets(account_id, *requests)
        assert calls == []

    def test_no_arguments(self, service, calls):
        with pytest.raises(InvalidPurchase, match="Account ID required"):
            service.purchase_tickets()
        assert calls == []

    def test_first_broken_rule_is_reported(self, service):
        with pytest.raises(InvalidPurchase) as exc_info:
            service.purchase_tickets(1, *_requests(children=21))
        assert "exceeds the maximum of 20" in exc_info.value.message

    def test_try_purchase_returns_failure(self, service, calls):
        result = service.try_purchase_tickets(1, _requests(children=1))
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidPurchase)
        assert calls == []

    def test_try_purchase_returns_success(self, service):
        result = service.try_purchase_tickets(1, _requests(adults=1))
        assert result == Success(PurchaseResult(no_of_seats=1, total_cost=20))


class TestCollaboratorFailures:
    def test_reservation_error_propagates_and_payment_is_skipped(
        self, service, seats, calls
    ):
        seats.error = ExternalServiceError(message="down", service="seat_reservation")
        with pytest.raises(ExternalServiceError):
            service.purchase_tickets(1, *_requests(adults=1))
        assert calls == [("reserve_seat", 1, 1)]

    def test_payment_error_propagates_after_reservation(self, service, payment, calls):
        payment.error = RuntimeError("card declined")
        with pytest.raises(RuntimeError, match="card declined"):
            service.purchase_tickets(1, *_requests(adults=1))
        # no compensation: the reservation stands
        assert calls == [("reserve_seat", 1, 1), ("make_payment", 1, 20)]


class TestPolicy:
    def test_defaults(self, service):
        assert service.policy == PurchasePolicy(TicketPrices(20, 10, 0), max_tickets=20)

    def test_custom_policy(self, seats, payment):
        service = TicketService(
            TicketServiceDeps(seat_reservation=seats, payment=payment),
            policy=PurchasePolicy(TicketPrices(adult=30), max_tickets=4),
        )
        assert service.purchase_tickets(1, *_requests(adults=2, children=2)) == (
            PurchaseResult(no_of_seats=4, total_cost=80)
        )
        with pytest.raises(InvalidPurchase):
            service.purchase_tickets(1, *_requests(adults=5))


class TestImmutability:
    def test_operation_cannot_be_replaced(self, service):
        with pytest.raises(dataclasses.FrozenInstanceError):
            service.purchase_tickets = lambda *args: None

    def test_policy_cannot_be_replaced(self, service):
        with pytest.raises(dataclasses.FrozenInstanceError):
            service.policy = PurchasePolicy(max_tickets=100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            service.policy.max_tickets = 100

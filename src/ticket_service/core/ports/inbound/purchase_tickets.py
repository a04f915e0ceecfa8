from __future__ import annotations

from typing import Any, Protocol, Sequence

from returns.result import Result

from ticket_service.core.domain.model.errors import PurchaseError
from ticket_service.core.domain.model.ticket import PurchasePolicy, PurchaseResult


class PurchaseTicketsUseCase(Protocol):
    policy: PurchasePolicy

    def purchase_tickets(
        self, account_id: Any = None, *requests: Any
    ) -> PurchaseResult:
        """Raises InvalidPurchase when the order breaks a purchase rule."""
        ...

    def try_purchase_tickets(
        self, account_id: Any, requests: Sequence[Any]
    ) -> Result[PurchaseResult, PurchaseError]: ...

from __future__ import annotations

from typing import Protocol


class TicketPaymentService(Protocol):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None: ...

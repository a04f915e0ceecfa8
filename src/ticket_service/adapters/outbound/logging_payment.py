from __future__ import annotations

from dataclasses import dataclass

from ticket_service.core.domain.model.errors import ExternalServiceError
from ticket_service.core.ports.outbound.payment import TicketPaymentService
from ticket_service.logging_config import logger

log = logger.bind(layer="payment")


@dataclass
class LoggingTicketPaymentService(TicketPaymentService):
    decline_accounts: set[int] | None = None

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        if account_id in (self.decline_accounts or set()):
            raise ExternalServiceError(
                message=f"payment declined for account {account_id}",
                service="payment",
            )
        log.info(
            "make_payment: account_id={} amount={}", account_id, total_amount_to_pay
        )

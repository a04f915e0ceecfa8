from __future__ import annotations

import json
from typing import Any

from returns.result import Success

from ticket_service.core.domain.model.errors import PurchaseError
from ticket_service.core.domain.model.ticket import TicketTypeRequest
from ticket_service.core.ports.inbound.purchase_tickets import PurchaseTicketsUseCase


def run_cli(usecase: PurchaseTicketsUseCase, raw: str) -> int:
    """
    raw: JSON string.
    Example:
      {"account_id": 1,
       "tickets": [{"ticket_type": "ADULT", "no_of_tickets": 2},
                   {"ticket_type": "INFANT", "no_of_tickets": 1}]}
    """
    try:
        payload = json.loads(raw)
        account_id, requests = _parse_payload(payload)
    except (ValueError, KeyError, TypeError) as e:
        print(f"invalid_input: {e}")
        return 2

    try:
        result = usecase.try_purchase_tickets(account_id, requests)
    except PurchaseError as e:
        # collaborator failure; rule violations arrive as a Failure
        print("[ng]", str(e))
        return 3

    if isinstance(result, Success):
        purchase = result.unwrap()
        print(
            "[ok]",
            {"no_of_seats": purchase.no_of_seats, "total_cost": purchase.total_cost},
        )
        return 0

    print("[ng]", str(result.failure()))
    return 1


def _parse_payload(payload: Any) -> tuple[Any, list[TicketTypeRequest]]:
    if not isinstance(payload, dict):
        raise ValueError("payload must be a JSON object")
    requests = [
        TicketTypeRequest(x["ticket_type"], x["no_of_tickets"])
        for x in payload.get("tickets", [])
    ]
    return payload.get("account_id"), requests

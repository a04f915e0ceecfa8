from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from ticket_service.core.domain.model.errors import (
    ExternalServiceError,
    InvalidPurchase,
    PurchaseError,
)
from ticket_service.core.domain.model.ticket import TicketType, TicketTypeRequest
from ticket_service.core.ports.inbound.purchase_tickets import PurchaseTicketsUseCase
from ticket_service.logging_config import logger

log = logger.bind(layer="web")

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class TicketLineIn(BaseModel):
    ticket_type: TicketType = Field(examples=["ADULT"])
    no_of_tickets: int = Field(gt=0, strict=True, examples=[2])


class PurchaseRequest(BaseModel):
    account_id: int = Field(strict=True, examples=[1])
    tickets: list[TicketLineIn]


class PurchaseResponse(BaseModel):
    no_of_seats: int
    total_cost: int


class PriceListResponse(BaseModel):
    prices: dict[str, int]
    max_tickets_per_order: int


class ErrorResponse(BaseModel):
    type: str
    message: str
    details: list[dict[str, Any]] | None = None


def _map_error_to_http(err: PurchaseError) -> tuple[int, ErrorResponse]:
    if isinstance(err, InvalidPurchase):
        return 400, ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, ExternalServiceError):
        return 502, ErrorResponse(type=type(err).__name__, message=str(err))

    return 500, ErrorResponse(type=type(err).__name__, message=str(err))


def create_app(purchase_uc: PurchaseTicketsUseCase) -> FastAPI:
    app = FastAPI(title="ticket_service")

    # --- exception handlers --------------------------------------------------

    @app.exception_handler(PurchaseError)
    async def handle_purchase_error(_: Request, exc: PurchaseError) -> JSONResponse:
        status, body = _map_error_to_http(exc)
        if status >= 500:
            log.error("purchase failed: {}", exc)
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=[
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ],
        )
        # malformed input is a 400, same as a rejected order
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        log.exception("unexpected error")
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- routes --------------------------------------------------------------

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/prices", response_model=PriceListResponse)
    def prices() -> Any:
        policy = purchase_uc.policy
        return PriceListResponse(
            prices=policy.prices.as_dict(),
            max_tickets_per_order=policy.max_tickets,
        )

    @app.post(
        "/purchases",
        response_model=PurchaseResponse,
        status_code=201,
        responses={
            400: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
            502: {"model": ErrorResponse},
        },
    )
    def purchase_tickets(req: PurchaseRequest) -> Any:
        requests = [
            TicketTypeRequest(ln.ticket_type, ln.no_of_tickets) for ln in req.tickets
        ]
        result = purchase_uc.try_purchase_tickets(req.account_id, requests)

        if isinstance(result, Success):
            purchase = result.unwrap()
            return PurchaseResponse(
                no_of_seats=purchase.no_of_seats, total_cost=purchase.total_cost
            )

        raise result.failure()

    return app

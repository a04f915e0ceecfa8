from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PurchaseError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class InvalidPurchase(PurchaseError):
    pass


@dataclass(frozen=True)
class ExternalServiceError(PurchaseError):
    service: str

    def __str__(self) -> str:  # pragma: no cover
        return f"external_service_failed: {self.service} ({self.message})"


@dataclass(frozen=True)
class InvalidTicketTypeRequest(TypeError):
    message: str
    field: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.field}: {self.message}"

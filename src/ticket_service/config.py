"""Application configuration."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticket_service.core.domain.model.ticket import PurchasePolicy, TicketPrices


class Settings(BaseSettings):
    """Settings read from TICKET_SERVICE_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TICKET_SERVICE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    max_tickets_per_order: int = Field(20, gt=0)
    adult_price: int = Field(20, ge=0)
    child_price: int = Field(10, ge=0)
    infant_price: int = Field(0, ge=0)

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def purchase_policy(self) -> PurchasePolicy:
        return PurchasePolicy(
            prices=TicketPrices(
                adult=self.adult_price,
                child=self.child_price,
                infant=self.infant_price,
            ),
            max_tickets=self.max_tickets_per_order,
        )

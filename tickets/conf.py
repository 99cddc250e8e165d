"""Purchase rules configuration.

Rules are read from the optional ``TICKETS`` Django setting::

    TICKETS = {
        "CHILD_PRICE": 10,
        "ADULT_PRICE": 20,
        "MAX_TICKETS_PER_PURCHASE": 20,
        "PAYMENT_SERVICE": "tickets.gateways.LoggingPaymentService",
        "SEAT_RESERVATION_SERVICE": "tickets.gateways.LoggingSeatReservationService",
    }

Missing keys fall back to the defaults below.
"""

from dataclasses import dataclass
from typing import Any, Final, Self

from django.conf import settings

DEFAULT_CHILD_PRICE: Final[int] = 10
DEFAULT_ADULT_PRICE: Final[int] = 20
DEFAULT_MAX_TICKETS_PER_PURCHASE: Final[int] = 20

DEFAULT_PAYMENT_SERVICE: Final[str] = "tickets.gateways.LoggingPaymentService"
DEFAULT_SEAT_RESERVATION_SERVICE: Final[str] = (
    "tickets.gateways.LoggingSeatReservationService"
)


def get_tickets_setting(key: str, default: Any) -> Any:
    return getattr(settings, "TICKETS", {}).get(key, default)


@dataclass(frozen=True)
class PurchaseRules:
    """Ticket prices and the per-purchase ticket limit."""

    child_price: int = DEFAULT_CHILD_PRICE
    adult_price: int = DEFAULT_ADULT_PRICE
    max_tickets_per_purchase: int = DEFAULT_MAX_TICKETS_PER_PURCHASE

    def __post_init__(self) -> None:
        if self.child_price < 0:
            raise ValueError("Child price cannot be negative")
        if self.adult_price < 0:
            raise ValueError("Adult price cannot be negative")
        if self.max_tickets_per_purchase < 0:
            raise ValueError("Maximum tickets per purchase cannot be negative")

    @classmethod
    def from_settings(cls) -> Self:
        return cls(
            child_price=int(get_tickets_setting("CHILD_PRICE", DEFAULT_CHILD_PRICE)),
            adult_price=int(get_tickets_setting("ADULT_PRICE", DEFAULT_ADULT_PRICE)),
            max_tickets_per_purchase=int(
                get_tickets_setting(
                    "MAX_TICKETS_PER_PURCHASE", DEFAULT_MAX_TICKETS_PER_PURCHASE
                )
            ),
        )

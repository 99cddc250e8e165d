from tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from tickets.domain.models import PurchaseSummary
from tickets.domain.value_objects import TicketCounts, TicketType, TicketTypeRequest

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "TicketCounts",
    "PurchaseSummary",
    "ErrorCode",
    "DomainError",
    "InvalidPurchaseError",
]

"""Domain models for the outcome of a purchase.

These are pure domain objects with no API input rules.
Nothing here is persisted; a summary lives for one purchase call.
"""

from dataclasses import dataclass

from tickets.domain.value_objects import TicketCounts


@dataclass(frozen=True)
class PurchaseSummary:
    """What was charged and reserved for an accepted purchase."""

    account_id: int
    counts: TicketCounts
    total_amount: int
    seats: int

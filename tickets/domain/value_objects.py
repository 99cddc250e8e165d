"""Domain primitives for ticket purchases."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Self


class TicketType(Enum):
    """Ticket categories that can be purchased."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """A single line item: a number of tickets of one type."""

    ticket_type: TicketType
    no_of_tickets: int


@dataclass(frozen=True)
class TicketCounts:
    """Per-type ticket totals derived from the line items of a request."""

    infant: int = 0
    child: int = 0
    adult: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        infant = child = adult = 0
        for request in requests:
            if request.ticket_type is TicketType.INFANT:
                infant += request.no_of_tickets
            elif request.ticket_type is TicketType.CHILD:
                child += request.no_of_tickets
            elif request.ticket_type is TicketType.ADULT:
                adult += request.no_of_tickets
        return cls(infant=infant, child=child, adult=adult)

    @property
    def total(self) -> int:
        return self.infant + self.child + self.adult

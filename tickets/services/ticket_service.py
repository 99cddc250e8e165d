"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (payment and seat reservation)
- Validate the purchase rules
- Compute price and seats, then dispatch to collaborators
- Return domain models or raise domain errors
"""

import logging

from tickets.conf import PurchaseRules
from tickets.domain import (
    InvalidPurchaseError,
    PurchaseSummary,
    TicketCounts,
    TicketTypeRequest,
)
from tickets.services.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        rules: PurchaseRules | None = None,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service
        self._rules = rules or PurchaseRules()

    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> PurchaseSummary:
        """Validate a purchase, take payment and reserve seats.

        Payment is made before seats are reserved. Collaborator failures
        propagate unchanged.

        Raises:
            InvalidPurchaseError: If the request exceeds the ticket limit or
                has child or infant tickets without an adult ticket.
        """
        counts = TicketCounts.from_requests(ticket_type_requests)

        if not self.is_valid_purchase(counts):
            logger.warning(
                "Rejected purchase for account %s: infant=%d child=%d adult=%d",
                account_id,
                counts.infant,
                counts.child,
                counts.adult,
            )
            raise InvalidPurchaseError()

        total_amount = self.calculate_total_amount(counts)
        seats = self.calculate_number_of_seats(counts)

        self._payment_service.make_payment(account_id, total_amount)
        self._reservation_service.reserve_seat(account_id, seats)

        logger.info(
            "Purchase for account %s accepted: amount=%d seats=%d",
            account_id,
            total_amount,
            seats,
        )
        return PurchaseSummary(
            account_id=account_id,
            counts=counts,
            total_amount=total_amount,
            seats=seats,
        )

    def is_valid_purchase(self, counts: TicketCounts) -> bool:
        if counts.total > self._rules.max_tickets_per_purchase:
            return False
        # Child and infant tickets need an accompanying adult.
        if (counts.child > 0 or counts.infant > 0) and counts.adult == 0:
            return False
        return True

    def calculate_total_amount(self, counts: TicketCounts) -> int:
        # Infants are free.
        return (
            counts.child * self._rules.child_price
            + counts.adult * self._rules.adult_price
        )

    def calculate_number_of_seats(self, counts: TicketCounts) -> int:
        # Infants sit on an adult's lap.
        return counts.child + counts.adult

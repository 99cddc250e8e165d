"""In-process stand-ins for the external payment and seat booking systems.

They accept every request and only log it. Point the ``TICKETS`` setting at
real gateway classes in deployments that talk to the external systems.
"""

import logging

from tickets.services.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingPaymentService(TicketPaymentService):
    """Payment gateway that records the charge in the log."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Payment of %d taken from account %s", total_amount_to_pay, account_id)


class LoggingSeatReservationService(SeatReservationService):
    """Seat booking system that records the reservation in the log."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("Reserved %d seats for account %s", total_seats_to_allocate, account_id)

"""Collaborator interfaces.

The payment gateway and the seat booking system live outside this app.
Implementations must be swappable so tests can substitute stand-ins.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats on behalf of an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...

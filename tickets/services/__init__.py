from tickets.services.factory import get_ticket_service
from tickets.services.interfaces import SeatReservationService, TicketPaymentService
from tickets.services.ticket_service import TicketService

__all__ = [
    "TicketService",
    "TicketPaymentService",
    "SeatReservationService",
    "get_ticket_service",
]

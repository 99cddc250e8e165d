"""Build a TicketService from Django settings."""

from django.utils.module_loading import import_string

from tickets.conf import (
    DEFAULT_PAYMENT_SERVICE,
    DEFAULT_SEAT_RESERVATION_SERVICE,
    PurchaseRules,
    get_tickets_setting,
)
from tickets.services.ticket_service import TicketService


def get_ticket_service() -> TicketService:
    """Return a TicketService wired with the configured collaborators."""
    payment_cls = import_string(
        get_tickets_setting("PAYMENT_SERVICE", DEFAULT_PAYMENT_SERVICE)
    )
    reservation_cls = import_string(
        get_tickets_setting("SEAT_RESERVATION_SERVICE", DEFAULT_SEAT_RESERVATION_SERVICE)
    )
    return TicketService(
        payment_service=payment_cls(),
        reservation_service=reservation_cls(),
        rules=PurchaseRules.from_settings(),
    )

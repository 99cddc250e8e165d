from tickets.gateways.logging_gateways import (
    LoggingPaymentService,
    LoggingSeatReservationService,
)

__all__ = ["LoggingPaymentService", "LoggingSeatReservationService"]

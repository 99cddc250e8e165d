"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from doubles import RecordingPaymentService, RecordingSeatReservationService
from tickets.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def payment_service(calls: list) -> RecordingPaymentService:
    return RecordingPaymentService(calls)


@pytest.fixture
def reservation_service(calls: list) -> RecordingSeatReservationService:
    return RecordingSeatReservationService(calls)


@pytest.fixture
def ticket_service(
    payment_service: RecordingPaymentService,
    reservation_service: RecordingSeatReservationService,
) -> TicketService:
    return TicketService(payment_service, reservation_service)

"""Unit tests for domain primitives.

Run with: pytest tests/test_domain.py -v
"""

import pytest

from tickets.domain import (
    ErrorCode,
    InvalidPurchaseError,
    TicketCounts,
    TicketType,
    TicketTypeRequest,
)


class TestTicketCounts:
    """Tests for aggregating line items into TicketCounts."""

    def test_empty_request_counts_zero(self):
        """No line items gives zero of every type."""
        counts = TicketCounts.from_requests([])
        assert counts == TicketCounts(infant=0, child=0, adult=0)
        assert counts.total == 0

    def test_sums_line_items_of_the_same_type(self):
        """Repeated line items of one type are added together."""
        counts = TicketCounts.from_requests(
            [
                TicketTypeRequest(TicketType.ADULT, 2),
                TicketTypeRequest(TicketType.CHILD, 1),
                TicketTypeRequest(TicketType.ADULT, 3),
                TicketTypeRequest(TicketType.INFANT, 1),
            ]
        )
        assert counts == TicketCounts(infant=1, child=1, adult=5)
        assert counts.total == 7

    def test_order_of_line_items_does_not_matter(self):
        items = [
            TicketTypeRequest(TicketType.INFANT, 2),
            TicketTypeRequest(TicketType.ADULT, 1),
            TicketTypeRequest(TicketType.CHILD, 4),
        ]
        assert TicketCounts.from_requests(items) == TicketCounts.from_requests(
            reversed(items)
        )

    def test_unknown_ticket_type_is_ignored(self):
        """Line items with an unrecognized type do not count."""
        counts = TicketCounts.from_requests(
            [TicketTypeRequest("SENIOR", 3), TicketTypeRequest(TicketType.ADULT, 1)]
        )
        assert counts == TicketCounts(adult=1)


class TestTicketTypeRequest:
    """Tests for the line item value object."""

    def test_is_immutable(self):
        request = TicketTypeRequest(TicketType.ADULT, 1)
        with pytest.raises(AttributeError):
            request.no_of_tickets = 5


class TestInvalidPurchaseError:
    """Tests for the purchase domain error."""

    def test_carries_code_and_message(self):
        error = InvalidPurchaseError()
        assert error.code is ErrorCode.INVALID_PURCHASE
        assert error.message == "Invalid ticket purchase request."

    def test_str_format(self):
        assert str(InvalidPurchaseError()) == (
            "INVALID_PURCHASE: Invalid ticket purchase request."
        )

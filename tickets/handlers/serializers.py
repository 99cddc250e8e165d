"""Serializers for purchase requests and responses.

Request serializers check input format only. Purchase rules are enforced by
the service.
"""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for a single ticket line item."""

    ticket_type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    no_of_tickets = serializers.IntegerField(min_value=1)


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for POST /api/purchases payloads."""

    account_id = serializers.IntegerField(min_value=1)
    tickets = TicketTypeRequestSerializer(many=True, allow_empty=True)

    def ticket_type_requests(self) -> list[TicketTypeRequest]:
        return [
            TicketTypeRequest(
                ticket_type=TicketType(item["ticket_type"]),
                no_of_tickets=item["no_of_tickets"],
            )
            for item in self.validated_data["tickets"]
        ]


class PurchaseSummarySerializer(serializers.Serializer):
    """Serializer for the PurchaseSummary domain model."""

    account_id = serializers.IntegerField()
    infant_tickets = serializers.IntegerField(source="counts.infant")
    child_tickets = serializers.IntegerField(source="counts.child")
    adult_tickets = serializers.IntegerField(source="counts.adult")
    total_amount = serializers.IntegerField()
    seats_reserved = serializers.IntegerField(source="seats")


"""Serializers for purchase requests.

Only the payload shape is checked here. Ticket rules belong to the service.
"""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for one ticket line."""

    ticket_type = serializers.ChoiceField(choices=[t.name for t in TicketType])
    quantity = serializers.IntegerField(min_value=0)

    def to_domain(self, data: dict) -> TicketTypeRequest:
        return TicketTypeRequest(
            ticket_type=TicketType[data["ticket_type"]],
            quantity=data["quantity"],
        )


class PurchaseSerializer(serializers.Serializer):
    """Serializer for a purchase request."""

    # Missing or null ids are rejected by the service with its own reason.
    account_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    ticket_requests = serializers.ListField(
        child=TicketRequestSerializer(), required=False, default=list
    )

    def ticket_type_requests(self) -> list[TicketTypeRequest]:
        line_serializer = TicketRequestSerializer()
        return [
            line_serializer.to_domain(line)
            for line in self.validated_data["ticket_requests"]
        ]

"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import InvalidPurchaseError
from tickets.handlers.serializers import PurchaseSerializer
from tickets.services import build_ticket_service


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"code": "INVALID_REQUEST", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        service = build_ticket_service()
        try:
            service.purchase_tickets(
                serializer.validated_data["account_id"],
                *serializer.ticket_type_requests(),
            )
        except InvalidPurchaseError as exc:
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

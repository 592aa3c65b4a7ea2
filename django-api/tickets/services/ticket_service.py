"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Return nothing or raise domain errors
"""

import logging

from tickets.domain.calculations import (
    has_adult_ticket,
    has_enough_adults_for_infants,
    total_payment,
    total_seats,
    total_tickets,
)
from tickets.domain.errors import ErrorCode, InvalidPurchaseError
from tickets.domain.models import MAX_TICKETS_PER_PURCHASE, TicketTypeRequest
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
    ) -> None:
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service

    def purchase_tickets(
        self, account_id: int | None, *ticket_requests: TicketTypeRequest
    ) -> None:
        """Validate the purchase, take payment and reserve seats.

        Payment is always taken before seats are reserved. Gateway errors
        propagate unchanged and a taken payment is not refunded.

        Raises:
            InvalidPurchaseError: If the purchase breaks a ticket rule. Only
                the first broken rule is reported.
        """
        try:
            self._validate(account_id, ticket_requests)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Purchase rejected for account %s: %s", account_id, exc.code.value
            )
            raise

        payment = total_payment(ticket_requests)
        self._payment_service.make_payment(account_id, payment)
        seats = total_seats(ticket_requests)
        self._seat_reservation_service.reserve_seat(account_id, seats)

        logger.info(
            "Purchase completed for account %s: payment=%s seats=%s",
            account_id,
            payment,
            seats,
        )

    def _validate(
        self, account_id: int | None, ticket_requests: tuple[TicketTypeRequest, ...]
    ) -> None:
        if account_id is None or account_id < 1:
            raise InvalidPurchaseError(ErrorCode.INVALID_ACCOUNT_ID)
        if not ticket_requests:
            raise InvalidPurchaseError(ErrorCode.NO_TICKET_REQUESTS)
        if not has_adult_ticket(ticket_requests):
            raise InvalidPurchaseError(ErrorCode.NO_ADULT_TICKET)
        if not has_enough_adults_for_infants(ticket_requests):
            raise InvalidPurchaseError(ErrorCode.NOT_ENOUGH_ADULTS)
        if total_tickets(ticket_requests) > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseError(ErrorCode.TOO_MANY_TICKETS)

"""Default collaborators that only record the calls they receive.

Used until a real payment gateway and seat booking system are configured.
"""

import logging

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingTicketPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Payment of %s taken from account %s", amount, account_id)


class LoggingSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("%s seat(s) reserved for account %s", seat_count, account_id)

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.services.ticket_service import TicketService

__all__ = ["TicketService", "build_ticket_service"]


def build_ticket_service() -> TicketService:
    """Build a TicketService wired to the configured gateways."""
    payment_cls = import_string(settings.TICKETS_PAYMENT_SERVICE)
    seat_reservation_cls = import_string(settings.TICKETS_SEAT_RESERVATION_SERVICE)
    return TicketService(payment_cls(), seat_reservation_cls())

"""Pure reducers over the ticket lines of a purchase.

Rules apply to the union of all lines, so several lines may share a type.
"""

from collections.abc import Sequence

from tickets.domain.models import TicketType, TicketTypeRequest


def total_tickets(requests: Sequence[TicketTypeRequest]) -> int:
    return sum(r.quantity for r in requests)


def total_for_type(requests: Sequence[TicketTypeRequest], ticket_type: TicketType) -> int:
    return sum(r.quantity for r in requests if r.ticket_type is ticket_type)


def has_adult_ticket(requests: Sequence[TicketTypeRequest]) -> bool:
    return any(
        r.ticket_type is TicketType.ADULT and r.quantity > 0 for r in requests
    )


def has_enough_adults_for_infants(requests: Sequence[TicketTypeRequest]) -> bool:
    """One infant per adult lap."""
    adults = total_for_type(requests, TicketType.ADULT)
    infants = total_for_type(requests, TicketType.INFANT)
    return adults >= infants


def total_payment(requests: Sequence[TicketTypeRequest]) -> int:
    return sum(r.ticket_type.price * r.quantity for r in requests)


def total_seats(requests: Sequence[TicketTypeRequest]) -> int:
    """Seats for adults and children. Infants are excluded."""
    return sum(r.quantity for r in requests if r.ticket_type.takes_seat)
